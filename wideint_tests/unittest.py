import secrets
import unittest
from random import Random
from typing import Optional
from unittest import main as ut_main

from structlog import get_logger

from wideint.conf.get_settings import get_global_settings
from wideint.constants import INT64_MAX, INT64_MIN, UINT64_MAX, sizeof
from wideint.types import DecodedValue

logger = get_logger()
main = ut_main


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        self._settings = get_global_settings()

    def new_buffer(self, size: int = sizeof.int64, *, fill: int = 0) -> bytearray:
        return bytearray([fill]) * size

    def random_int64(self) -> int:
        return self.rng.randint(INT64_MIN, INT64_MAX)

    def random_uint64(self) -> int:
        return self.rng.randint(0, UINT64_MAX)

    def assertNativeNumber(self, value: DecodedValue, expected: int) -> None:
        self.assertIsInstance(value, int)
        self.assertEqual(value, expected)

    def assertDecimalString(self, value: DecodedValue, expected: str) -> None:
        self.assertIsInstance(value, str)
        self.assertEqual(value, expected)
