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
This module parses integers written as text, the way C's `strtoll(text, NULL, 0)` reads them.

Leading whitespace is skipped, then an optional sign, then the radix is picked from the prefix: `0x`/`0X` is hex, a
leading `0` is octal and anything else is decimal. The longest run of digits valid for that radix is consumed and the
rest of the text is ignored. Python's `int` keeps the whole magnitude, so values far beyond 64 bits come out exact and
can be range checked afterwards.

>>> parse_integer('123456789')
WideInteger(sign=<Sign.POSITIVE: '+'>, magnitude=123456789)
>>> parse_integer('-0x1234567890').value
-78187493520
>>> parse_integer('0777').value
511
>>> parse_integer('  +42 apples').value
42
>>> parse_integer('10000000000000000000000000').magnitude
10000000000000000000000000
>>> parse_integer('foo')
Traceback (most recent call last):
    ...
wideint.exceptions.ParseError: no digits found in input string
"""

import re

from wideint.exceptions import ParseError
from wideint.types import Sign, WideInteger

# order matters: "0x" without hex digits falls back to the octal branch and reads as zero
_INTEGER_RE = re.compile(
    r'[ \t\n\v\f\r]*'
    r'(?P<sign>[+-]?)'
    r'(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))'
)


def parse_integer(text: str) -> WideInteger:
    """Parse `text` into an exact sign and magnitude, raises ParseError when no digits are found."""
    if not isinstance(text, str):
        raise TypeError(f'expected str, got {type(text).__name__}')

    match = _INTEGER_RE.match(text)
    if match is None:
        raise ParseError('no digits found in input string')

    sign = Sign.NEGATIVE if match['sign'] == '-' else Sign.POSITIVE
    if match['hex'] is not None:
        magnitude = _accumulate(match['hex'], 16)
    elif match['oct'] is not None:
        magnitude = _accumulate(match['oct'], 8)
    else:
        magnitude = _accumulate(match['dec'], 10)

    return WideInteger(sign, magnitude).normalized()


def _accumulate(digits: str, radix: int) -> int:
    magnitude = 0
    for digit in digits:
        magnitude = magnitude * radix + int(digit, 16)
    return magnitude
