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

from argparse import ArgumentParser, Namespace

from structlog import get_logger

logger = get_logger()


def create_parser() -> ArgumentParser:
    from wideint_cli.util import create_parser
    parser = create_parser()
    parser.add_argument('data', help='Hex encoded bytes holding the integer')
    parser.add_argument('--offset', type=int, default=0, help='Byte offset of the integer inside data')
    parser.add_argument('--unsigned', action='store_true', help='Decode as uint64 instead of int64')
    parser.add_argument('--endianness', choices=['LE', 'BE'], help='Byte order, defaults to the configured one')
    return parser


def execute(args: Namespace) -> None:
    from wideint import WideIntError, read_int64, read_uint64

    try:
        data = bytes.fromhex(args.data)
    except ValueError as e:
        raise WideIntError(f'invalid hex data: {args.data!r}') from e

    read = read_uint64 if args.unsigned else read_int64
    value = read(data, args.offset, args.endianness)
    logger.debug('decoded value', data=args.data, offset=args.offset, result_type=type(value).__name__)
    print(value)


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
