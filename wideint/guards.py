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

from typing import Any

from structlog import get_logger

from wideint.constants import NULL, sizeof
from wideint.exceptions import AccessViolation

logger = get_logger()


def is_null(buffer: Any) -> bool:
    return buffer is None or buffer is NULL


def check_region(
    buffer: Any,
    offset: int = 0,
    *,
    size: int = sizeof.int64,
    writable: bool,
    op_name: str = 'access',
) -> memoryview:
    """ Check that `buffer[offset:offset + size]` can be accessed and return a byte view of exactly that region.

    Nothing is read or written here, this must run before any byte access. `op_name` is only used in error messages.
    The caller owns the returned view and should release it, for example by using it as a context manager.
    """
    action = 'write to' if writable else 'read from'
    if is_null(buffer):
        logger.debug('rejected NULL pointer access', op=op_name)
        raise AccessViolation(f'{op_name}: cannot {action} NULL pointer')

    try:
        view = memoryview(buffer)
    except TypeError as e:
        raise TypeError(f'{op_name}: expected a buffer, got {type(buffer).__name__}') from e

    if view.format != 'B' or view.ndim != 1:
        base, view = view, view.cast('B')
        base.release()

    # a rejected access must not keep the buffer exported through the traceback
    if isinstance(offset, bool) or not isinstance(offset, int):
        view.release()
        raise TypeError(f'{op_name}: offset must be an int, got {type(offset).__name__}')
    length = view.nbytes
    if offset < 0 or offset + size > length:
        logger.debug('rejected out of bounds access', op=op_name, offset=offset, size=size, length=length)
        view.release()
        raise AccessViolation(f'{op_name}: cannot {action} out of bounds (offset={offset}, length={length})')

    if writable and view.readonly:
        view.release()
        raise AccessViolation(f'{op_name}: cannot {action} a read-only buffer')

    return view[offset:offset + size]
