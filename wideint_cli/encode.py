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
    parser.add_argument(
        'value',
        help='Integer to encode: decimal, 0x hex or 0 octal, with optional sign. '
             'Put -- before a negative hex value, e.g. -- -0x1f',
    )
    parser.add_argument('--unsigned', action='store_true', help='Encode as uint64 instead of int64')
    parser.add_argument('--endianness', choices=['LE', 'BE'], help='Byte order, defaults to the configured one')
    return parser


def execute(args: Namespace) -> None:
    from wideint import sizeof, write_int64, write_uint64

    buf = bytearray(sizeof.int64)
    write = write_uint64 if args.unsigned else write_int64
    write(buf, 0, args.value, args.endianness)
    logger.debug('encoded value', value=args.value, unsigned=args.unsigned, endianness=args.endianness)
    print(buf.hex())


def main():
    parser = create_parser()
    args = parser.parse_args()
    execute(args)
