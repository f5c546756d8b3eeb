"""
EOF1 Container Builder
^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Serialisation of section contents into a version 1 EOF container.
"""

from ethereum_types.bytes import Bytes
from ethereum_types.numeric import U16, ulen

from .exceptions import EofError
from .format import EOF1_VERSION, EOF_FORMAT_BYTE, EOF_MAGIC
from .header import SectionKind
from .utils.ensure import ensure


def build_eof1_container(
    code_section: Bytes, data_section: Bytes = b""
) -> Bytes:
    """
    Build an EOF1 container from its section contents.

    Parameters
    ----------
    code_section :
        Contents of the code section. Must not be empty.
    data_section :
        Contents of the data section. The data section is left out of the
        header when this is empty.

    Returns
    -------
    container : `Bytes`
        The EOF1 container.

    Raises
    ------
    InvalidEof
        If `code_section` is empty.
    OverflowError
        If a section is longer than `U16.MAX_VALUE` bytes.
    """
    ensure(len(code_section) != 0, EofError.EMPTY_CODE_SECTION)
    code_size = U16(ulen(code_section))
    data_size = U16(ulen(data_section))

    # Add the format byte, magic and version
    container = bytes([EOF_FORMAT_BYTE]) + EOF_MAGIC + bytes([EOF1_VERSION])

    # Add the code section header
    container += bytes([SectionKind.CODE])
    container += code_size.to_bytes(U16(2), "big")

    # Add the data section header
    if data_size != 0:
        container += bytes([SectionKind.DATA])
        container += data_size.to_bytes(U16(2), "big")

    container += bytes([SectionKind.TERMINATOR])

    container += code_section
    container += data_section

    return container
