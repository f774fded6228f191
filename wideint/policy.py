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
Choice between a native number and an exact decimal string when handing a decoded value back to the caller.

Values whose magnitude is at most the safe-integer boundary (2**53 by default, the largest integer a double holds
exactly in both signs) are returned as `int`, anything bigger is returned as its exact decimal text.

>>> to_decoded_value(WideInteger.from_int(-2**53), safe_max=2**53)
-9007199254740992
>>> to_decoded_value(WideInteger.from_int(2**53 + 1), safe_max=2**53)
'9007199254740993'
>>> to_decoded_value(WideInteger.from_int(-2**53 - 1), safe_max=2**53)
'-9007199254740993'
"""

from typing import Optional

from wideint.types import DecodedValue, WideInteger


def is_safe(value: WideInteger, *, safe_max: int) -> bool:
    return value.magnitude <= safe_max


def to_decoded_value(value: WideInteger, *, safe_max: Optional[int] = None) -> DecodedValue:
    """Return `int` for safe magnitudes (zero included) and the decimal `str` otherwise.

    When `safe_max` is not given, the SAFE_INTEGER_MAX setting is used.
    """
    if safe_max is None:
        from wideint.conf import get_global_settings
        safe_max = get_global_settings().SAFE_INTEGER_MAX
    if value.magnitude == 0 or is_safe(value, safe_max=safe_max):
        return value.value
    return str(value.value)
