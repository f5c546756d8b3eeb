"""
EOF Format Detection
^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Cheap checks that tell an [EIP-3540] container apart from legacy bytecode
without reading its section headers.

[EIP-3540]: https://eips.ethereum.org/EIPS/eip-3540
"""

import enum

from ethereum_types.bytes import Bytes

from .exceptions import EofError
from .utils.ensure import ensure

EOF_FORMAT_BYTE = 0xEF
EOF_MAGIC = b"\xCA\xFE"
EOF_MAGIC_LENGTH = len(EOF_MAGIC)
EOF1_VERSION = 1

EOF_VERSION_OFFSET = 1 + EOF_MAGIC_LENGTH
"""
Offset of the version byte, right after the format byte and magic.
"""


class EofVersion(enum.Enum):
    """
    Enumeration of the different kinds of code.
    Legacy code is assigned zero.
    """

    LEGACY = 0
    EOF1 = 1


def has_format_byte(code: Bytes) -> bool:
    """
    Check whether the code starts with the EOF format byte.

    Parameters
    ----------
    code :
        The code to check.

    Returns
    -------
    has_format_byte : `bool`
        `True` if `code` is non-empty and its first byte is `0xEF`.
    """
    return len(code) != 0 and code[0] == EOF_FORMAT_BYTE


def has_eof_magic(code: Bytes) -> bool:
    """
    Check whether the magic defined by EIP-3540 follows the format byte.

    Parameters
    ----------
    code :
        The code to check.

    Returns
    -------
    has_eof_magic : `bool`
        `True` if bytes 1 and 2 of `code` are `0xCA 0xFE`.
    """
    return (
        1 + EOF_MAGIC_LENGTH <= len(code)
        and code[1 : 1 + EOF_MAGIC_LENGTH] == EOF_MAGIC
    )


def is_eof_code(code: Bytes) -> bool:
    """
    Check whether the code starts with the format byte and EOF magic.
    Anything else is legacy code.
    """
    return has_format_byte(code) and has_eof_magic(code)


def get_eof_version(code: Bytes) -> EofVersion:
    """
    Get the version of the code.

    Parameters
    ----------
    code :
        The code to check.

    Returns
    -------
    version : `EofVersion`
        `EofVersion.LEGACY` for code without the EOF prefix, otherwise the
        version of the container.

    Raises
    ------
    InvalidEof
        If the code has the EOF prefix but no supported version byte.
    """
    if not is_eof_code(code):
        return EofVersion.LEGACY

    ensure(
        len(code) > EOF_VERSION_OFFSET
        and code[EOF_VERSION_OFFSET] == EOF1_VERSION,
        EofError.INVALID_VERSION,
    )
    return EofVersion.EOF1
