# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/12 16:30:05
# @Author : Kariko Lin

"""Command-line entry: `pycfgdiff LEFT_ROOT RIGHT_ROOT [--ignore FILE]`.

Exit status is 0 whether or not differences were found,
1 on any I/O or ignore-list decode failure, 2 on bad usage.
"""

import argparse
import codecs
import logging
from typing import Sequence

from . import __version__
from .compare import compare_trees
from .consts import AUTO_ENCODING, DEFAULT_ENCODING, STDOUT, ReportFormat
from .ignore import IgnoreFilter, IgnoreListParser
from .report import get_writer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pycfgdiff',
        description='Report values that differ between two trees '
                    'of INI-style .cfg files.')
    parser.add_argument('left', metavar='LEFT_ROOT',
                        help='the root of the "left" tree')
    parser.add_argument('right', metavar='RIGHT_ROOT',
                        help='the root of the "right" tree')
    parser.add_argument('-i', '--ignore', metavar='PATH',
                        help='file of section/property names to ignore, '
                             'one per line')
    parser.add_argument('-f', '--format', default=ReportFormat.TEXT.value,
                        choices=[i.value for i in ReportFormat],
                        help='report format (default: %(default)s)')
    parser.add_argument('-o', '--output', default=STDOUT, metavar='PATH',
                        help='write the report here instead of stdout')
    parser.add_argument('-e', '--encoding', default=DEFAULT_ENCODING,
                        metavar='CODEC',
                        help=f'codec of the .cfg files, or "{AUTO_ENCODING}" '
                             'to guess per file (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log progress and dropped lines')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.encoding != AUTO_ENCODING:
        try:
            codecs.lookup(args.encoding)
        except LookupError:
            parser.error(f'unknown encoding: {args.encoding}')
    logging.getLogger().setLevel(
        logging.DEBUG if args.verbose else logging.WARNING)

    try:
        ignore = (IgnoreListParser(args.ignore).read()
                  if args.ignore else IgnoreFilter())
        reports = compare_trees(
            args.left, args.right,
            ignore=ignore, encoding=args.encoding)
        get_writer(args.format, args.output).write(reports)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(e)
        return 1
    logging.info(f'{len(reports)} file(s) with differences.')
    return 0
