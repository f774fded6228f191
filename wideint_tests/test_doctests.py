import doctest
import importlib

import pytest
from structlog.testing import capture_logs

MODULES = [
    'wideint.codec',
    'wideint.int64',
    'wideint.parser',
    'wideint.policy',
    'wideint.types',
    'wideint.validation',
    'wideint.serialization',
    'wideint.serialization.encoding.int64',
    'wideint.utils.yaml',
]


@pytest.mark.parametrize('module_name', MODULES)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    # debug logs would otherwise end up in the doctest output
    with capture_logs():
        result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
