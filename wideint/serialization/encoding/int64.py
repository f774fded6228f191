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
This module implements encoding of 64-bit integers on a stream, the signedness and byte order are parametrized.

The format is exactly the one written by `wideint.int64`: 8 bytes of two's-complement.

>>> se = Serializer.build_memory_serializer()
>>> encode_int64(se, 0, signed=True, endianness='BE')  # writes 0000000000000000
>>> encode_int64(se, -1234, signed=True, endianness='BE')  # writes fffffffffffffb2e
>>> encode_int64(se, '18446744073709551615', signed=False, endianness='LE')  # writes ffffffffffffffff
>>> bytes(se.finalize()).hex()
'0000000000000000fffffffffffffb2effffffffffffffff'

>>> de = Deserializer.build_memory_deserializer(bytes.fromhex('0000000000000000fffffffffffffb2effffffffffffffff'))
>>> decode_int64(de, signed=True, endianness='BE')
0
>>> decode_int64(de, signed=True, endianness='BE')
-1234
>>> decode_int64(de, signed=False, endianness='LE')
'18446744073709551615'
"""

from typing import Optional, Union

from wideint.codec import decode, encode
from wideint.constants import sizeof
from wideint.int64 import InputValue, resolve_endianness, to_wide_integer
from wideint.policy import to_decoded_value
from wideint.serialization import Deserializer, Serializer
from wideint.types import DecodedValue, Endianness


def encode_int64(
    serializer: Serializer,
    value: InputValue,
    *,
    signed: bool,
    endianness: Optional[Union[Endianness, str]] = None,
) -> None:
    """ Encode a 64-bit integer with the given signedness and byte order.

    Nothing is written when the value cannot be parsed or is out of range.
    """
    data = encode(to_wide_integer(value, signed=signed), endianness=resolve_endianness(endianness))
    serializer.write_bytes(data)


def decode_int64(
    deserializer: Deserializer,
    *,
    signed: bool,
    endianness: Optional[Union[Endianness, str]] = None,
    safe_max: Optional[int] = None,
) -> DecodedValue:
    """ Decode a 64-bit integer with the given signedness and byte order.

    The result follows the same int/str rule as `wideint.int64` reads.
    """
    byte_order = resolve_endianness(endianness)
    data = deserializer.read_bytes(sizeof.int64)
    return to_decoded_value(decode(memoryview(data), signed=signed, endianness=byte_order), safe_max=safe_max)
