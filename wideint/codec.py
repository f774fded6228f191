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
This module implements the 8-byte two's-complement layout of 64-bit integers, in either byte order.

A negative value is stored as `2**64 - magnitude`, the byte order only decides where each byte goes.

>>> encode(WideInteger.from_int(-1234), endianness=Endianness.BIG).hex()
'fffffffffffffb2e'
>>> encode(WideInteger.from_int(1234), endianness=Endianness.LITTLE).hex()
'd204000000000000'
>>> decode(bytes.fromhex('fffffffffffffb2e'), signed=True, endianness=Endianness.BIG).value
-1234
>>> decode(bytes.fromhex('fffffffffffffb2e'), signed=False, endianness=Endianness.BIG).value
18446744073709550382
"""

from wideint.constants import sizeof
from wideint.types import Endianness, Sign, WideInteger

_BYTE_SIZE = sizeof.int64
_MODULUS = 1 << (8 * _BYTE_SIZE)
_SIGN_BIT = 1 << (8 * _BYTE_SIZE - 1)


def encode(value: WideInteger, *, endianness: Endianness) -> bytes:
    """ Encode an already range checked value into 8 bytes.

    Only the width is checked here, a value outside of both int64 and uint64 raises `ValueError`.

    >>> encode(WideInteger.from_int(2**64), endianness=Endianness.BIG)
    Traceback (most recent call last):
    ...
    ValueError: too big to encode
    """
    try:
        if value.is_negative:
            return (-value.magnitude).to_bytes(_BYTE_SIZE, byteorder=endianness.byteorder, signed=True)
        return value.magnitude.to_bytes(_BYTE_SIZE, byteorder=endianness.byteorder, signed=False)
    except OverflowError as e:
        raise ValueError('too big to encode') from e


def decode(data: bytes | memoryview, *, signed: bool, endianness: Endianness) -> WideInteger:
    """ Decode exactly 8 bytes into a sign and magnitude.
    """
    if len(data) != _BYTE_SIZE:
        raise ValueError(f'expected {_BYTE_SIZE} bytes, got {len(data)}')
    pattern = int.from_bytes(data, byteorder=endianness.byteorder, signed=False)
    if signed and pattern & _SIGN_BIT:
        return WideInteger(Sign.NEGATIVE, _MODULUS - pattern)
    return WideInteger(Sign.POSITIVE, pattern)
