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
from typing import Optional

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .serializer import Serializer
from .types import Buffer


class MemorySerializer(Serializer):
    """Serializer that appends every field to a growing `bytearray`."""

    def __init__(self) -> None:
        self._data: Optional[bytearray] = bytearray()

    def _open_data(self) -> bytearray:
        if self._data is None:
            raise SerializationError('serializer already finalized')
        return self._data

    @override
    def finalize(self) -> bytes:
        result = bytes(self._open_data())
        self._data = None
        return result

    @override
    def cur_pos(self) -> int:
        return len(self._open_data())

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._open_data().extend(memoryview(data).cast('B'))


class MemoryDeserializer(Deserializer):
    """Deserializer over a private copy of the input, the caller's buffer is not kept."""

    def __init__(self, data: Buffer) -> None:
        self._data = bytes(data)
        self._pos = 0

    def remaining(self) -> int:
        return len(self._data) - self._pos

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise SerializationError(f'{self.remaining()} trailing bytes after the last field')

    @override
    def is_empty(self) -> bool:
        return self.remaining() == 0

    @override
    def read_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError('value cannot be negative')
        if self.remaining() < n:
            raise OutOfDataError(f'need {n} bytes at position {self._pos}, only {self.remaining()} left')
        start, self._pos = self._pos, self._pos + n
        return self._data[start:self._pos]
