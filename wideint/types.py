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

import sys
from enum import Enum
from typing import Literal, NamedTuple, TypeAlias, Union


class Sign(Enum):
    POSITIVE = '+'
    NEGATIVE = '-'


class Endianness(Enum):
    """Byte order of a 64-bit field, it never affects the sign semantics."""

    LITTLE = 'LE'
    BIG = 'BE'

    @property
    def byteorder(self) -> Literal['little', 'big']:
        """Name used by `int.to_bytes` and `int.from_bytes`."""
        return 'little' if self is Endianness.LITTLE else 'big'

    @classmethod
    def native(cls) -> 'Endianness':
        return cls.LITTLE if sys.byteorder == 'little' else cls.BIG

    @classmethod
    def from_value(cls, value: Union['Endianness', str]) -> 'Endianness':
        """Accept a member or one of 'LE', 'BE', 'little', 'big' (case insensitive)."""
        if isinstance(value, Endianness):
            return value
        if not isinstance(value, str):
            raise TypeError(f'invalid endianness: {value!r}')
        match value.lower():
            case 'le' | 'little':
                return cls.LITTLE
            case 'be' | 'big':
                return cls.BIG
        raise ValueError(f'invalid endianness: {value!r}')


class WideInteger(NamedTuple):
    """An exact integer split in sign and unsigned magnitude.

    >>> WideInteger.from_int(-5)
    WideInteger(sign=<Sign.NEGATIVE: '-'>, magnitude=5)
    >>> WideInteger(Sign.NEGATIVE, 0).normalized()
    WideInteger(sign=<Sign.POSITIVE: '+'>, magnitude=0)
    >>> WideInteger(Sign.NEGATIVE, 2**63).value
    -9223372036854775808
    """

    sign: Sign
    magnitude: int

    @classmethod
    def from_int(cls, value: int) -> 'WideInteger':
        if value < 0:
            return cls(Sign.NEGATIVE, -value)
        return cls(Sign.POSITIVE, value)

    @property
    def is_negative(self) -> bool:
        # -0 is just zero
        return self.sign is Sign.NEGATIVE and self.magnitude != 0

    @property
    def value(self) -> int:
        return -self.magnitude if self.is_negative else self.magnitude

    def normalized(self) -> 'WideInteger':
        if self.sign is Sign.NEGATIVE and self.magnitude == 0:
            return WideInteger(Sign.POSITIVE, 0)
        return self


# A native number when the magnitude is safe, otherwise the exact decimal text.
DecodedValue: TypeAlias = int | str
