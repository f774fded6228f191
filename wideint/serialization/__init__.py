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
Sequential (stream) encoding of 64-bit integers, for writing several fields one after the other without tracking
offsets by hand.

>>> se = Serializer.build_memory_serializer()
>>> se.write_int64(-1, endianness='BE')
>>> se.write_uint64('0x1234567890', endianness='BE')
>>> data = bytes(se.finalize())
>>> data.hex()
'ffffffffffffffff0000001234567890'
>>> de = Deserializer.build_memory_deserializer(data)
>>> de.read_int64(endianness='BE')
-1
>>> de.read_uint64(endianness='BE')
78187493520
>>> de.finalize()
"""

from .deserializer import Deserializer
from .exceptions import OutOfDataError, SerializationError
from .memory import MemoryDeserializer, MemorySerializer
from .serializer import Serializer

__all__ = [
    'Serializer',
    'Deserializer',
    'MemorySerializer',
    'MemoryDeserializer',
    'SerializationError',
    'OutOfDataError',
]
