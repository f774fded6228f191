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
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Union

from .types import Buffer

if TYPE_CHECKING:
    from wideint.types import DecodedValue, Endianness

    from .memory import MemoryDeserializer


class Deserializer(ABC):
    """Sequential reader, the counterpart of Serializer."""

    @staticmethod
    def build_memory_deserializer(data: Buffer) -> MemoryDeserializer:
        from .memory import MemoryDeserializer
        return MemoryDeserializer(data)

    def finalize(self) -> None:
        """Check that every field was consumed."""
        raise TypeError('this deserializer does not support finalization')

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def read_bytes(self, n: int) -> Buffer:
        """Read exactly n bytes, OutOfDataError if there isn't enough data."""
        raise NotImplementedError

    def read_int64(self, *, endianness: Optional[Union[Endianness, str]] = None) -> DecodedValue:
        from .encoding.int64 import decode_int64
        return decode_int64(self, signed=True, endianness=endianness)

    def read_uint64(self, *, endianness: Optional[Union[Endianness, str]] = None) -> DecodedValue:
        from .encoding.int64 import decode_int64
        return decode_int64(self, signed=False, endianness=endianness)
