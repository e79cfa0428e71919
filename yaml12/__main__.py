#!/usr/bin/env python3
"""
Normalize YAML through yaml12: read, decode, re-encode and write.

Usage: python -m yaml12 [FILE] [-o OUTPUT] [--multi] [-v|-q]
"""

import logging
import sys
from argparse import ArgumentParser

import yaml12


def main(argv=None):
    parser = ArgumentParser(
        prog='yaml12',
        description="Read YAML, convert it to Python values and write it back.")
    parser.add_argument('file', nargs='?', default=None,
                        help="YAML file to read (default: standard input)")
    parser.add_argument('-o', '--output', default=None,
                        help="File to write (default: standard output)")
    parser.add_argument('--multi', action='store_true',
                        help="Keep every document of a multi-document stream")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Spew out even more information than normal")
    parser.add_argument('-q', '--quiet', action='store_true',
                        help="Restrict output to warnings and errors")
    options = parser.parse_args(argv)

    if options.verbose and options.quiet:
        parser.error("Conflicting arguments: '--verbose' and '--quiet'")
    loglevel = logging.INFO
    if options.verbose:
        loglevel = logging.DEBUG
    elif options.quiet:
        loglevel = logging.WARN
    logging.basicConfig(format='%(levelname)s: %(message)s', level=loglevel)

    try:
        if options.file is None:
            text = sys.stdin.read()
        else:
            with open(options.file, 'rb') as fp:
                text = fp.read()
        data = yaml12.parse_yaml(text, multi=options.multi)
        yaml12.write_yaml(data, options.output, multi=options.multi)
    except (yaml12.YAMLError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
