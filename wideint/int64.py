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
Read and write 64-bit integers at an offset of a caller owned buffer.

Values can be given as `int` or as text (decimal, `0x` hex or `0` octal, with optional sign), reads return `int` when
the magnitude is at most 2**53 and the exact decimal `str` otherwise.

>>> buf = bytearray(sizeof.int64)
>>> write_int64(buf, 0, '9223372036854775807')
>>> read_int64(buf, 0)
'9223372036854775807'
>>> write_int64_be(buf, 0, -123456789)
>>> bytes(buf).hex()
'fffffffff8a432eb'
>>> read_int64_be(buf)
-123456789
>>> read_uint64_be(buf)
'18446744073586094827'

Every operation checks the target region first, and a failed write leaves the buffer untouched:

>>> write_uint64(buf, 0, '10000000000000000000000000')
Traceback (most recent call last):
    ...
wideint.exceptions.RangeError: input string numerical value out of range
>>> bytes(buf).hex()
'fffffffff8a432eb'
>>> read_int64(NULL)
Traceback (most recent call last):
    ...
wideint.exceptions.AccessViolation: read_int64: cannot read from NULL pointer
"""

from typing import Any, Optional, Union

from wideint.codec import decode, encode
from wideint.constants import NULL, sizeof  # noqa: F401
from wideint.guards import check_region
from wideint.parser import parse_integer
from wideint.policy import to_decoded_value
from wideint.types import DecodedValue, Endianness, WideInteger
from wideint.validation import coerce_native, validate_range

EndiannessArg = Optional[Union[Endianness, str]]
InputValue = Union[int, float, str]


def resolve_endianness(endianness: EndiannessArg = None) -> Endianness:
    """Turn an endianness argument into a member, `None` means the configured default or the platform order."""
    if endianness is None:
        from wideint.conf import get_global_settings
        default = get_global_settings().DEFAULT_ENDIANNESS
        return default if default is not None else Endianness.native()
    return Endianness.from_value(endianness)


def to_wide_integer(value: InputValue, *, signed: bool) -> WideInteger:
    """Parse (if needed) and range check a value about to be written."""
    if isinstance(value, str):
        wide = parse_integer(value)
        validate_range(wide, signed=signed, from_string=True)
    else:
        wide = coerce_native(value)
        validate_range(wide, signed=signed)
    return wide


def _write(op_name: str, buffer: Any, offset: int, value: InputValue, *, signed: bool,
           endianness: EndiannessArg) -> None:
    with check_region(buffer, offset, size=sizeof.int64, writable=True, op_name=op_name) as view:
        data = encode(to_wide_integer(value, signed=signed), endianness=resolve_endianness(endianness))
        # single assignment, nothing above touches the buffer
        view[:] = data


def _read(op_name: str, buffer: Any, offset: int, *, signed: bool, endianness: EndiannessArg) -> DecodedValue:
    with check_region(buffer, offset, size=sizeof.int64, writable=False, op_name=op_name) as view:
        value = decode(view, signed=signed, endianness=resolve_endianness(endianness))
    return to_decoded_value(value)


def write_int64(buffer: Any, offset: int, value: InputValue, endianness: EndiannessArg = None) -> None:
    """Write a signed 64-bit integer at `buffer[offset:offset + 8]`."""
    _write('write_int64', buffer, offset, value, signed=True, endianness=endianness)


def read_int64(buffer: Any, offset: int = 0, endianness: EndiannessArg = None) -> DecodedValue:
    """Read a signed 64-bit integer from `buffer[offset:offset + 8]`."""
    return _read('read_int64', buffer, offset, signed=True, endianness=endianness)


def write_uint64(buffer: Any, offset: int, value: InputValue, endianness: EndiannessArg = None) -> None:
    """Write an unsigned 64-bit integer at `buffer[offset:offset + 8]`, negative values are rejected."""
    _write('write_uint64', buffer, offset, value, signed=False, endianness=endianness)


def read_uint64(buffer: Any, offset: int = 0, endianness: EndiannessArg = None) -> DecodedValue:
    """Read an unsigned 64-bit integer from `buffer[offset:offset + 8]`."""
    return _read('read_uint64', buffer, offset, signed=False, endianness=endianness)


def write_int64_le(buffer: Any, offset: int, value: InputValue) -> None:
    _write('write_int64_le', buffer, offset, value, signed=True, endianness=Endianness.LITTLE)


def write_int64_be(buffer: Any, offset: int, value: InputValue) -> None:
    _write('write_int64_be', buffer, offset, value, signed=True, endianness=Endianness.BIG)


def read_int64_le(buffer: Any, offset: int = 0) -> DecodedValue:
    return _read('read_int64_le', buffer, offset, signed=True, endianness=Endianness.LITTLE)


def read_int64_be(buffer: Any, offset: int = 0) -> DecodedValue:
    return _read('read_int64_be', buffer, offset, signed=True, endianness=Endianness.BIG)


def write_uint64_le(buffer: Any, offset: int, value: InputValue) -> None:
    _write('write_uint64_le', buffer, offset, value, signed=False, endianness=Endianness.LITTLE)


def write_uint64_be(buffer: Any, offset: int, value: InputValue) -> None:
    _write('write_uint64_be', buffer, offset, value, signed=False, endianness=Endianness.BIG)


def read_uint64_le(buffer: Any, offset: int = 0) -> DecodedValue:
    return _read('read_uint64_le', buffer, offset, signed=False, endianness=Endianness.LITTLE)


def read_uint64_be(buffer: Any, offset: int = 0) -> DecodedValue:
    return _read('read_uint64_be', buffer, offset, signed=False, endianness=Endianness.BIG)
