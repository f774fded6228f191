import pytest

from wideint.exceptions import ParseError
from wideint.parser import parse_integer
from wideint.types import Sign, WideInteger


@pytest.mark.parametrize('text, expected', [
    ('0', 0),
    ('123456789', 123456789),
    ('+123', 123),
    ('-123', -123),
    ('0x1234567890', 0x1234567890),
    ('0X1234567890', 0x1234567890),
    ('-0xdeadBEEF', -0xdeadbeef),
    ('0777', 0o777),
    ('-0777', -0o777),
    ('9223372036854775807', 2**63 - 1),
    ('-9223372036854775808', -2**63),
    ('18446744073709551615', 2**64 - 1),
])
def test_parse_values(text: str, expected: int) -> None:
    assert parse_integer(text).value == expected


def test_radix_matches_int() -> None:
    assert parse_integer('0x1234567890').magnitude == int('1234567890', 16)
    assert parse_integer('0777').magnitude == int('777', 8)
    assert parse_integer('1234567890').magnitude == int('1234567890', 10)


def test_magnitude_beyond_64_bits_is_exact() -> None:
    assert parse_integer('10000000000000000000000000').magnitude == 10**25
    assert parse_integer('-0x10000000000000000').value == -2**64
    assert parse_integer('0x' + 'f' * 40).magnitude == 16**40 - 1


@pytest.mark.parametrize('text, expected', [
    ('  42', 42),
    ('\t\n-42', -42),
    ('123abc', 123),
    ('0x1fz', 0x1f),
    ('089', 0),
    ('0778', 0o77),
    ('0x', 0),
    ('-0xg', 0),
    ('12 34', 12),
])
def test_longest_digit_run(text: str, expected: int) -> None:
    assert parse_integer(text).value == expected


def test_negative_zero_is_positive() -> None:
    assert parse_integer('-0') == WideInteger(Sign.POSITIVE, 0)
    assert parse_integer('-0x0') == WideInteger(Sign.POSITIVE, 0)


@pytest.mark.parametrize('text', ['foo', '', '   ', '+', '-', '+-1', 'x10', ' - 1', '١'])
def test_no_digits(text: str) -> None:
    with pytest.raises(ParseError, match='no digits found in input string'):
        parse_integer(text)


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_integer('foo')


def test_not_a_string() -> None:
    with pytest.raises(TypeError):
        parse_integer(123)  # type: ignore[arg-type]
