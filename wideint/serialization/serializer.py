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
    from wideint.types import Endianness

    from .memory import MemorySerializer


class Serializer(ABC):
    """Sequential writer, each 64-bit field is appended right after the previous one."""

    @staticmethod
    def build_memory_serializer() -> MemorySerializer:
        from .memory import MemorySerializer
        return MemorySerializer()

    def finalize(self) -> Buffer:
        """Get the resulting byte sequence, the serializer cannot be reused after this."""
        raise TypeError('this serializer does not support finalization')

    @abstractmethod
    def cur_pos(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def write_bytes(self, data: Buffer) -> None:
        raise NotImplementedError

    def write_int64(self, value: Union[int, str], *, endianness: Optional[Union[Endianness, str]] = None) -> None:
        """Write a signed 64-bit integer, given as int or text."""
        from .encoding.int64 import encode_int64
        encode_int64(self, value, signed=True, endianness=endianness)

    def write_uint64(self, value: Union[int, str], *, endianness: Optional[Union[Endianness, str]] = None) -> None:
        """Write an unsigned 64-bit integer, given as int or text."""
        from .encoding.int64 import encode_int64
        encode_int64(self, value, signed=False, endianness=endianness)
