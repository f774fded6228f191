# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from wideint.conf.settings import WideIntSettings
from wideint.utils.yaml import model_from_extended_yaml

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'WIDEINT_CONFIG_YAML'
DEFAULT_SETTINGS_FILEPATH = str(Path(__file__).parent / 'default.yml')


class _SettingsMetadata(NamedTuple):
    source: str
    settings: WideIntSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> WideIntSettings:
    """
    Returns the settings, loading them on first use.

    The settings come from the yaml file in the 'WIDEINT_CONFIG_YAML' env var, or from the default file when it is not
    set.
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def load_yaml_settings(filepath: str) -> WideIntSettings:
    """Load and validate a settings file, without touching the global settings."""
    return model_from_extended_yaml(WideIntSettings, filepath=filepath, custom_root=Path(__file__).parent)


def _load_settings_singleton(source: str) -> WideIntSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    settings = load_yaml_settings(source)
    logger.debug('settings loaded', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
