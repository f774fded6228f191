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

from typing import Any, Optional

from pydantic import field_validator

from wideint.types import Endianness
from wideint.utils.pydantic import BaseModel


class WideIntSettings(BaseModel):
    # Largest magnitude returned as a native number on reads, bigger magnitudes come back as decimal strings. The
    # default is the largest integer a double-precision float represents exactly.
    SAFE_INTEGER_MAX: int = 2**53

    # Byte order used when an operation is not given one, `None` uses the order of the running platform.
    DEFAULT_ENDIANNESS: Optional[Endianness] = None

    @field_validator('SAFE_INTEGER_MAX')
    @classmethod
    def _validate_safe_integer_max(cls, value: int) -> int:
        if not 0 <= value < 2**64:
            raise ValueError('SAFE_INTEGER_MAX must be in [0, 2**64)')
        return value

    @field_validator('DEFAULT_ENDIANNESS', mode='before')
    @classmethod
    def _parse_endianness(cls, value: Any) -> Optional[Endianness]:
        if value is None or isinstance(value, Endianness):
            return value
        if not isinstance(value, str):
            # pydantic only reports ValueError as a validation error
            raise ValueError(f'invalid endianness: {value!r}')
        return Endianness.from_value(value)
