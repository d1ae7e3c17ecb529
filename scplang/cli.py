#!/usr/bin/env python3
"""
scpc - scp command line front end
=================================

Scans an scp script and prints its token stream.

Usage:
    scpc [path] [options]

Options:
    -v, --verbose   Log lexer progress to stderr
    -q, --quiet     Only report diagnostics, do not print tokens
"""

import argparse
import logging
import sys
from typing import List, Optional

from .lexer import Lexer
from .vm import VirtualMachine

logger = logging.getLogger(__name__)

SAMPLE_SOURCE = '1 + 2 "Hello, World!"'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scpc",
        description="Tokenize an scp script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    scpc                  # Scan the built-in sample
    scpc hello.scp        # Scan a file
    scpc hello.scp -v     # Scan with debug logging
        """
    )

    parser.add_argument('path', nargs='?',
                        help='Script to scan (defaults to a built-in sample)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log lexer progress to stderr')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only report diagnostics, do not print tokens')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s:%(message)s',
    )

    # Nothing consumes tokens yet; the engine is created so the pipeline shape is in place
    vm = VirtualMachine()
    logger.debug("created %r", vm)

    if args.path is None:
        lexer = Lexer(SAMPLE_SOURCE)
    else:
        lexer = Lexer.from_file(args.path)
        if lexer.has_errors():
            return 1

    tokens = lexer.scan_tokens()

    if not args.quiet:
        for token in tokens:
            print(token.format())

    return 1 if lexer.has_errors() else 0


if __name__ == "__main__":
    sys.exit(main())
