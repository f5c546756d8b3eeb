"""
Utilities for the EOF tools
"""

import logging
from typing import Iterator, TextIO, Tuple

from ethereum_types.bytes import Bytes

from eof_header.utils.hexadecimal import hex_to_bytes

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


class FatalException(Exception):
    """Exception that causes the tool to stop"""

    pass


def get_stream_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get a logger that writes to stderr.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        formatter = logging.Formatter(LOG_FORMAT)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    logger.setLevel(level=level)

    return logger


def read_hex_codes(stream: TextIO) -> Iterator[Tuple[int, Bytes]]:
    """
    Read one hex encoded code per line, skipping blank lines and `#`
    comments. Yields the line number along with the decoded code.
    """
    for line_number, line in enumerate(stream, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue
        try:
            code = hex_to_bytes(text)
        except ValueError as e:
            raise FatalException(
                f"line {line_number}: invalid hex string {text!r}"
            ) from e
        yield line_number, code
