import pytest

from wideint.codec import decode, encode
from wideint.types import Endianness, Sign, WideInteger

LE = Endianness.LITTLE
BE = Endianness.BIG


@pytest.mark.parametrize('value, hex_be', [
    (0, '0000000000000000'),
    (1, '0000000000000001'),
    (-1, 'ffffffffffffffff'),
    (-1234, 'fffffffffffffb2e'),
    (2**63 - 1, '7fffffffffffffff'),
    (-2**63, '8000000000000000'),
    (0x1234567890, '0000001234567890'),
])
def test_signed_layout(value: int, hex_be: str) -> None:
    data_be = bytes.fromhex(hex_be)
    assert encode(WideInteger.from_int(value), endianness=BE) == data_be
    assert encode(WideInteger.from_int(value), endianness=LE) == data_be[::-1]
    assert decode(data_be, signed=True, endianness=BE).value == value
    assert decode(data_be[::-1], signed=True, endianness=LE).value == value


def test_unsigned_decode_never_negative() -> None:
    decoded = decode(b'\xff' * 8, signed=False, endianness=LE)
    assert decoded == WideInteger(Sign.POSITIVE, 2**64 - 1)
    decoded = decode(bytes.fromhex('8000000000000000'), signed=False, endianness=BE)
    assert decoded == WideInteger(Sign.POSITIVE, 2**63)


def test_int64_min_magnitude() -> None:
    decoded = decode(bytes.fromhex('8000000000000000'), signed=True, endianness=BE)
    assert decoded == WideInteger(Sign.NEGATIVE, 2**63)


def test_negative_zero_encodes_as_zero() -> None:
    assert encode(WideInteger(Sign.NEGATIVE, 0), endianness=LE) == bytes(8)


def test_matches_int_to_bytes() -> None:
    for value in [-2**63, -2**53 - 1, -7, 0, 7, 2**53 + 1, 2**63 - 1]:
        for endianness in Endianness:
            expected = value.to_bytes(8, byteorder=endianness.byteorder, signed=True)
            assert encode(WideInteger.from_int(value), endianness=endianness) == expected


def test_wrong_length() -> None:
    with pytest.raises(ValueError):
        decode(bytes(7), signed=True, endianness=LE)
    with pytest.raises(ValueError):
        decode(bytes(9), signed=True, endianness=LE)


def test_opposite_order_reverses_pattern() -> None:
    data = encode(WideInteger.from_int(0x0102030405060708), endianness=LE)
    assert decode(data, signed=False, endianness=BE).magnitude == 0x0807060504030201


@pytest.mark.parametrize('value', [
    WideInteger(Sign.POSITIVE, 2**64),
    WideInteger(Sign.NEGATIVE, 2**63 + 1),
    WideInteger(Sign.NEGATIVE, 2**64),
])
def test_encode_rejects_values_wider_than_64_bits(value: WideInteger) -> None:
    for endianness in Endianness:
        with pytest.raises(ValueError, match='too big to encode'):
            encode(value, endianness=endianness)
