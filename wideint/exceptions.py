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


class WideIntError(Exception):
    """Base class for exceptions in wideint."""
    pass


class ParseError(WideIntError, ValueError):
    """Raised when an input string has no valid digits for its radix."""
    pass


class RangeError(WideIntError, ValueError):
    """Raised when a value does not fit the target width and signedness."""
    pass


class AccessViolation(WideIntError):
    """Raised when a read or write targets a NULL, out of bounds or read-only region."""
    pass
