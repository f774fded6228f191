from pathlib import Path
from typing import Iterator

import pytest
from pydantic import ValidationError
from structlog.testing import capture_logs

from wideint.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, WideIntSettings, get_global_settings
from wideint.conf.get_settings import (
    CONFIG_YAML_ENV_VAR,
    _reset_settings_singleton,
    get_settings_source,
    load_yaml_settings,
)
from wideint.types import Endianness

FIXTURES = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    _reset_settings_singleton()
    yield monkeypatch
    _reset_settings_singleton()


def test_default_file() -> None:
    settings = load_yaml_settings(DEFAULT_SETTINGS_FILEPATH)
    assert settings == WideIntSettings()
    assert settings.SAFE_INTEGER_MAX == 2**53
    assert settings.DEFAULT_ENDIANNESS is None


def test_unittests_file() -> None:
    settings = load_yaml_settings(UNITTESTS_SETTINGS_FILEPATH)
    assert settings.SAFE_INTEGER_MAX == 2**53
    assert settings.DEFAULT_ENDIANNESS is Endianness.LITTLE


def test_extends_from_package_root() -> None:
    # default.yml is not next to the fixture, it is found under the conf package
    settings = load_yaml_settings(str(FIXTURES / 'big_endian.yml'))
    assert settings.DEFAULT_ENDIANNESS is Endianness.BIG

    settings = load_yaml_settings(str(FIXTURES / 'small_safe_max.yml'))
    assert settings.DEFAULT_ENDIANNESS is Endianness.BIG
    assert settings.SAFE_INTEGER_MAX == 1000


def test_invalid_values() -> None:
    with pytest.raises(ValidationError):
        load_yaml_settings(str(FIXTURES / 'invalid_safe_max.yml'))
    with pytest.raises(ValidationError):
        load_yaml_settings(str(FIXTURES / 'unknown_key.yml'))
    with pytest.raises(ValidationError):
        WideIntSettings(DEFAULT_ENDIANNESS='middle')
    with pytest.raises(ValidationError):
        WideIntSettings(SAFE_INTEGER_MAX=2**64)


def test_settings_are_frozen() -> None:
    settings = WideIntSettings()
    with pytest.raises(ValidationError):
        settings.SAFE_INTEGER_MAX = 1  # type: ignore[misc]


def test_global_settings_from_env(fresh_settings: pytest.MonkeyPatch) -> None:
    source = str(FIXTURES / 'small_safe_max.yml')
    fresh_settings.setenv(CONFIG_YAML_ENV_VAR, source)

    with capture_logs() as logs:
        settings = get_global_settings()
    assert settings.SAFE_INTEGER_MAX == 1000
    assert get_settings_source() == source
    assert get_global_settings() is settings
    assert logs == [{'event': 'settings loaded', 'log_level': 'debug', 'source': source}]


def test_global_settings_drive_defaults(fresh_settings: pytest.MonkeyPatch) -> None:
    from wideint import read_int64, write_int64

    fresh_settings.setenv(CONFIG_YAML_ENV_VAR, str(FIXTURES / 'small_safe_max.yml'))
    buf = bytearray(8)
    write_int64(buf, 0, 1000)
    assert bytes(buf) == bytes.fromhex('00000000000003e8')
    assert read_int64(buf) == 1000
    write_int64(buf, 0, 1001)
    assert read_int64(buf) == '1001'


def test_loading_twice_with_different_files(fresh_settings: pytest.MonkeyPatch) -> None:
    fresh_settings.setenv(CONFIG_YAML_ENV_VAR, UNITTESTS_SETTINGS_FILEPATH)
    get_global_settings()
    fresh_settings.setenv(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    with pytest.raises(Exception, match='loading config twice with a different file'):
        get_global_settings()
