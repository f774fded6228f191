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

from typing import Final, NamedTuple

from wideint.types import Endianness

# width in bits of every value handled by this package
INT64_WIDTH: Final[int] = 64

# largest magnitude a double-precision float represents exactly, in both signs
SAFE_INTEGER_MAX: Final[int] = 2**53

INT64_MIN: Final[int] = -2**63
INT64_MAX: Final[int] = 2**63 - 1
UINT64_MAX: Final[int] = 2**64 - 1

# byte order of the running platform, either 'LE' or 'BE'
ENDIANNESS: Final[str] = Endianness.native().value


class _TypeSizes(NamedTuple):
    int64: int
    uint64: int


sizeof: Final = _TypeSizes(int64=8, uint64=8)
alignof: Final = _TypeSizes(int64=8, uint64=8)


class _NullPointer:
    """Sentinel for the NULL pointer, a zero-length location that can never be read or written."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'NULL'

    def __len__(self) -> int:
        return 0

    def __bool__(self) -> bool:
        return False


NULL: Final = _NullPointer()
