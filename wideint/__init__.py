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
Exact 64-bit integers in raw byte buffers.
"""

from wideint.constants import ENDIANNESS, NULL, alignof, sizeof
from wideint.exceptions import AccessViolation, ParseError, RangeError, WideIntError
from wideint.int64 import (
    read_int64,
    read_int64_be,
    read_int64_le,
    read_uint64,
    read_uint64_be,
    read_uint64_le,
    write_int64,
    write_int64_be,
    write_int64_le,
    write_uint64,
    write_uint64_be,
    write_uint64_le,
)
from wideint.types import DecodedValue, Endianness, Sign, WideInteger
from wideint.version import __version__

__all__ = [
    'ENDIANNESS',
    'NULL',
    'alignof',
    'sizeof',
    'AccessViolation',
    'ParseError',
    'RangeError',
    'WideIntError',
    'read_int64',
    'read_int64_be',
    'read_int64_le',
    'read_uint64',
    'read_uint64_be',
    'read_uint64_le',
    'write_int64',
    'write_int64_be',
    'write_int64_le',
    'write_uint64',
    'write_uint64_be',
    'write_uint64_le',
    'DecodedValue',
    'Endianness',
    'Sign',
    'WideInteger',
    '__version__',
]
