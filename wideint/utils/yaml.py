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

"""
Loading of YAML settings files into pydantic models.

A file can build on top of another one with the reserved `extends` key, its own keys take precedence and nested
mappings are merged key by key:

>>> _merge_mappings({'a': 1, 'b': {'c': 2, 'd': 3}}, {'b': {'d': 4}, 'e': 5}) == {'a': 1, 'b': {'c': 2, 'd': 4}, 'e': 5}
True
"""

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def _merge_mappings(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge_mappings(merged[key], value)
        else:
            merged[key] = value
    return merged


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must contain a mapping, an empty file is an empty dict."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(
    *,
    filepath: Union[Path, str],
    custom_root: Optional[Path] = None,
    _seen: frozenset[Path] = frozenset(),
) -> dict[str, Any]:
    """Read a yaml file following its `extends` chain.

    Relative `extends` paths are resolved against the extending file first and against `custom_root` second.
    """
    path = Path(filepath).resolve()
    if path in _seen:
        raise ValueError('Cannot parse yaml with recursive extensions.')

    contents = dict_from_yaml(filepath=path)
    parent = contents.pop(_EXTENDS_KEY, None)
    if not parent:
        return contents

    parent_path = path.parent / str(parent)
    if not parent_path.is_file() and custom_root is not None:
        parent_path = custom_root / str(parent)

    base = dict_from_extended_yaml(filepath=parent_path, custom_root=custom_root, _seen=_seen | {path})
    return _merge_mappings(base, contents)


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> T:
    """Takes a pydantic model and a filepath to a yaml file and returns a validated model instance."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
