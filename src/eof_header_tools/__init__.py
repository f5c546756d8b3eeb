"""
Defines the EOF tool for checking EOF1 containers.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, Text, TextIO

from eof_header import __version__

from .check import HEADER_COMMAND, VALIDATE_COMMAND, EofCheck, check_arguments
from .utils import FatalException, get_stream_logger

DESCRIPTION = """
This is the EOF tool. It reads hex encoded EVM code, one code per
line, and checks the EIP-3540 (version 1) container header of each.

You can use this to run the following tools:
    1. validate: Print whether each code is a valid EOF1 container.
    2. header: Print the code and data section sizes as JSON.

Both tools exit with status 0 when every input is valid, 1 when any
input is invalid and 2 when the input cannot be read.
"""


def create_parser() -> argparse.ArgumentParser:
    """
    Create a command-line argument parser for the EOF tool.
    """
    new_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    new_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show the version of the tool.",
    )

    verbosity = new_parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose",
        dest="log_level",
        action="store_const",
        const=logging.DEBUG,
        default=logging.INFO,
        help="Log the result for every input.",
    )
    verbosity.add_argument(
        "--quiet",
        dest="log_level",
        action="store_const",
        const=logging.WARNING,
        help="Only log warnings and errors.",
    )

    subparsers = new_parser.add_subparsers(dest="eof_tool")

    check_arguments(subparsers)

    return new_parser


def main(
    args: Optional[Sequence[Text]] = None,
    out_file: Optional[TextIO] = None,
    in_file: Optional[TextIO] = None,
) -> int:
    """Run the tools based on the given options."""
    parser = create_parser()

    options = parser.parse_args(args)

    if out_file is None:
        out_file = sys.stdout

    if in_file is None:
        in_file = sys.stdin

    if options.eof_tool in (VALIDATE_COMMAND, HEADER_COMMAND):
        eof_check = EofCheck(options, out_file, in_file)
        try:
            return eof_check.run()
        except (FatalException, OSError) as e:
            get_stream_logger("EOF", options.log_level).error("%s", e)
            return 2
    else:
        parser.print_help(file=out_file)
        return 0
