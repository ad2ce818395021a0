#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

import argparse
import os.path
import sys
from pathlib import Path

from waver.config import Constant
from waver.errors import WaverError
from waver.parser import parse
from waver.query import signals
from waver.serializer import dump


def output_filename(vcd_file):
    return os.path.splitext(vcd_file)[0] + Constant.OUTPUT_EXTENSION.value


def print_signals(document):
    for name, port in signals(document).items():
        print("{} {} {} {}{}".format(
            port.identifier, port.kind.name.lower(), port.width, name, port.reference))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='convert a VCD waveform into a JSON document')
    parser.add_argument('vcd_file')
    parser.add_argument('json_file', nargs='?', default=None,
        help='defaults to vcd_file with a .json extension')
    parser.add_argument('--indent', type=int,
                        default=Constant.JSON_INDENT.value,
                        help='JSON indentation, 0 for one line per value')
    parser.add_argument('--signals', action='store_true',
        help='print the signal table instead of writing JSON')
    parser.add_argument('--debug', action='store_true',
                        help='print skipped tokens and scopes while parsing')
    args = parser.parse_args(argv)

    try:
        document = parse(Path(args.vcd_file), debug=args.debug)
    except WaverError as e:
        print('Failed to parse the VCD file: {}'.format(e), file=sys.stderr)
        return 1

    if args.signals:
        print_signals(document)
        return 0

    json_file = args.json_file
    if json_file is None:
        json_file = output_filename(args.vcd_file)

    if os.path.realpath(json_file) == os.path.realpath(args.vcd_file):
        print('Failed to write the JSON file: {} is the input file'.format(json_file),
              file=sys.stderr)
        return 1

    try:
        with open(json_file, 'w') as f:
            dump(document, f, indent=args.indent)
    except OSError as e:
        print('Failed to write the JSON file: {}'.format(e), file=sys.stderr)
        return 1

    if args.debug:
        print('wrote {}'.format(json_file))
    return 0


if __name__ == '__main__':
    sys.exit(main())
