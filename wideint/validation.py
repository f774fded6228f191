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
Range checks for sized integers, applied the same way to native numbers and to parsed strings.

>>> bounds(signed=True)
(-9223372036854775808, 9223372036854775807)
>>> bounds(signed=False)
(0, 18446744073709551615)
>>> validate_range(WideInteger.from_int(-2**63), signed=True)
>>> validate_range(WideInteger.from_int(2**63), signed=True)
Traceback (most recent call last):
    ...
wideint.exceptions.RangeError: numerical value out of range
"""

import math

from wideint.constants import INT64_WIDTH
from wideint.exceptions import RangeError
from wideint.types import WideInteger


def bounds(*, signed: bool, width: int = INT64_WIDTH) -> tuple[int, int]:
    """Smallest and largest value that fit in `width` bits."""
    if signed:
        return -(1 << (width - 1)), (1 << (width - 1)) - 1
    return 0, (1 << width) - 1


def is_in_range(value: WideInteger, *, signed: bool, width: int = INT64_WIDTH) -> bool:
    if value.is_negative:
        return signed and value.magnitude <= 1 << (width - 1)
    _, upper = bounds(signed=signed, width=width)
    return value.magnitude <= upper


def validate_range(
    value: WideInteger,
    *,
    signed: bool,
    width: int = INT64_WIDTH,
    from_string: bool = False,
) -> None:
    """Raise RangeError if `value` does not fit, a negative value never fits an unsigned target."""
    if not is_in_range(value, signed=signed, width=width):
        if from_string:
            raise RangeError('input string numerical value out of range')
        raise RangeError('numerical value out of range')


def coerce_native(value: int | float) -> WideInteger:
    """Convert a native number to a WideInteger, floats must be finite and integral.

    >>> coerce_native(9007199254740992.0).magnitude
    9007199254740992
    >>> coerce_native(1.5)
    Traceback (most recent call last):
        ...
    TypeError: value must be an integer, got 1.5
    """
    # bool is an int subclass
    if isinstance(value, bool):
        raise TypeError('value must be an integer, got bool')
    if isinstance(value, int):
        return WideInteger.from_int(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise RangeError('numerical value out of range')
        if not value.is_integer():
            raise TypeError(f'value must be an integer, got {value!r}')
        return WideInteger.from_int(int(value))
    raise TypeError(f'value must be an int or a str, got {type(value).__name__}')
