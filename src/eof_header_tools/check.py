"""
Validate EOF1 containers and print their headers.
"""

import argparse
import json
from typing import Any, Optional, TextIO

from eof_header.exceptions import EofError, InvalidEof
from eof_header.header import Eof1Header, read_eof1_header
from eof_header.utils.hexadecimal import bytes_to_hex

from .utils import get_stream_logger, read_hex_codes

VALIDATE_COMMAND = "validate"
HEADER_COMMAND = "header"


def check_arguments(subparsers: argparse._SubParsersAction) -> None:
    """
    Adds the arguments for the validate and header tools.
    """
    validate_parser = subparsers.add_parser(
        VALIDATE_COMMAND,
        help="Report whether each input is a valid EOF1 container.",
    )
    header_parser = subparsers.add_parser(
        HEADER_COMMAND,
        help="Print the section sizes of each input as JSON.",
    )
    for parser in (validate_parser, header_parser):
        parser.add_argument(
            "file",
            nargs="?",
            default=None,
            help="File with one hex encoded code per line (default: stdin).",
        )


class EofCheck:
    """
    Read codes from a file or stdin and check each of them.
    """

    def __init__(
        self, options: Any, out_file: TextIO, in_file: TextIO
    ) -> None:
        self.command: str = options.eof_tool
        self.file: Optional[str] = options.file
        self.out_file = out_file
        self.in_file = in_file
        self.logger = get_stream_logger("EOF", options.log_level)

    def run(self) -> int:
        """
        Check every input. Returns 0 if all of them are valid, 1 otherwise.
        """
        if self.file is None:
            return self.check_stream(self.in_file)

        with open(self.file, "r") as f:
            return self.check_stream(f)

    def check_stream(self, stream: TextIO) -> int:
        """
        Check every code in `stream`.
        """
        total = 0
        invalid = 0
        for line_number, code in read_hex_codes(stream):
            total += 1
            try:
                header = read_eof1_header(code)
            except InvalidEof as e:
                invalid += 1
                self.logger.debug(
                    "line %d: %s rejected, %s",
                    line_number,
                    bytes_to_hex(code),
                    e,
                )
                self.write_error(e.error)
                continue

            self.logger.debug(
                "line %d: code size %s, data size %s",
                line_number,
                header.code_size,
                header.data_size,
            )
            self.write_header(header)

        self.logger.info("%d of %d inputs valid", total - invalid, total)
        return 0 if invalid == 0 else 1

    def write_header(self, header: Eof1Header) -> None:
        if self.command == HEADER_COMMAND:
            result = {
                "codeSize": int(header.code_size),
                "dataSize": int(header.data_size),
            }
            self.out_file.write(json.dumps(result) + "\n")
        else:
            self.out_file.write("valid\n")

    def write_error(self, error: EofError) -> None:
        if self.command == HEADER_COMMAND:
            self.out_file.write(json.dumps({"error": str(error)}) + "\n")
        else:
            self.out_file.write(f"invalid: {error}\n")
