import sys

import pytest

from wideint.types import Endianness, Sign, WideInteger


def test_from_int() -> None:
    assert WideInteger.from_int(0) == WideInteger(Sign.POSITIVE, 0)
    assert WideInteger.from_int(-2**63) == WideInteger(Sign.NEGATIVE, 2**63)
    assert WideInteger.from_int(-2**63).value == -2**63


def test_negative_zero() -> None:
    value = WideInteger(Sign.NEGATIVE, 0)
    assert not value.is_negative
    assert value.value == 0
    assert value.normalized() == WideInteger(Sign.POSITIVE, 0)


def test_native_endianness() -> None:
    assert Endianness.native().byteorder == sys.byteorder


@pytest.mark.parametrize('text, expected', [
    ('LE', Endianness.LITTLE),
    ('le', Endianness.LITTLE),
    ('little', Endianness.LITTLE),
    ('BE', Endianness.BIG),
    ('big', Endianness.BIG),
    (Endianness.BIG, Endianness.BIG),
])
def test_endianness_from_value(text: str | Endianness, expected: Endianness) -> None:
    assert Endianness.from_value(text) is expected


def test_endianness_invalid() -> None:
    with pytest.raises(ValueError):
        Endianness.from_value('middle')
    with pytest.raises(TypeError):
        Endianness.from_value(1)  # type: ignore[arg-type]
