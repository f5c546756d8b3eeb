"""
EOF1 Header
^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Reading and validation of the header of a version 1 EOF container.

A container is laid out as:

======  ==================  ===========================================
Offset  Field               Size
======  ==================  ===========================================
0       format byte         1 (`0xEF`)
1       magic               2 (`0xCA 0xFE`)
3       version             1 (`0x01`)
4       section headers     kind byte, followed by a 2 byte big endian
                            size for code and data sections
...     terminator          1 (`0x00`)
...     code section        `code_size`
...     data section        `data_size` (absent when zero)
======  ==================  ===========================================

No bytes beyond the declared sections are allowed.
"""

import enum
from dataclasses import dataclass

from ethereum_types.bytes import Bytes
from ethereum_types.frozen import slotted_freezable
from ethereum_types.numeric import U16, Uint

from .exceptions import EofError, InvalidEof
from .format import (
    EOF1_VERSION,
    EOF_VERSION_OFFSET,
    has_eof_magic,
    has_format_byte,
)
from .utils.ensure import ensure

SECTION_SIZE_LENGTH = 2

CODE_SIZE_OFFSET = EOF_VERSION_OFFSET + 2
"""
Offset of the code section size in a valid container, which always declares
its code section first.
"""


class SectionKind(enum.IntEnum):
    """
    Section kinds known to version 1 containers.
    """

    TERMINATOR = 0
    CODE = 1
    DATA = 2


@slotted_freezable
@dataclass
class Eof1Header:
    """
    Section sizes declared by a valid EOF1 container.
    """

    code_size: U16
    data_size: U16

    @property
    def body_start_index(self) -> Uint:
        """
        Offset of the first byte of the code section.
        """
        # version, code header and terminator
        index = EOF_VERSION_OFFSET + 1 + 1 + SECTION_SIZE_LENGTH + 1
        if self.data_size != 0:
            index += 1 + SECTION_SIZE_LENGTH
        return Uint(index)


def read_eof1_header(code: Bytes) -> Eof1Header:
    """
    Parse and validate the header of an EOF1 container.

    The header is read in a single pass and the first rule the code breaks
    is reported.

    Parameters
    ----------
    code :
        The code to parse.

    Returns
    -------
    header : `Eof1Header`
        The sizes of the code and data sections.

    Raises
    ------
    InvalidEof
        If `code` is legacy code or a malformed EOF1 container. The `error`
        attribute tells which rule was broken.
    """
    ensure(has_format_byte(code), EofError.INVALID_FORMAT_BYTE)
    ensure(has_eof_magic(code), EofError.INVALID_MAGIC)

    code_length = len(code)
    counter = EOF_VERSION_OFFSET
    ensure(
        counter < code_length and code[counter] == EOF1_VERSION,
        EofError.INVALID_VERSION,
    )
    counter += 1

    code_size = U16(0)
    data_size = U16(0)
    while counter < code_length:
        section_kind = code[counter]
        counter += 1

        if section_kind == SectionKind.TERMINATOR:
            break
        elif section_kind == SectionKind.CODE:
            ensure(code_size == 0, EofError.MULTIPLE_CODE_SECTIONS)
            ensure(
                counter + SECTION_SIZE_LENGTH <= code_length,
                EofError.CODE_SECTION_SIZE_MISSING,
            )
            code_size = U16.from_be_bytes(
                code[counter : counter + SECTION_SIZE_LENGTH]
            )
            ensure(code_size != 0, EofError.EMPTY_CODE_SECTION)
            counter += SECTION_SIZE_LENGTH
        elif section_kind == SectionKind.DATA:
            ensure(code_size != 0, EofError.DATA_SECTION_BEFORE_CODE_SECTION)
            ensure(data_size == 0, EofError.MULTIPLE_DATA_SECTIONS)
            ensure(
                counter + SECTION_SIZE_LENGTH <= code_length,
                EofError.DATA_SECTION_SIZE_MISSING,
            )
            data_size = U16.from_be_bytes(
                code[counter : counter + SECTION_SIZE_LENGTH]
            )
            ensure(data_size != 0, EofError.EMPTY_DATA_SECTION)
            counter += SECTION_SIZE_LENGTH
        else:
            raise InvalidEof(
                EofError.UNKNOWN_SECTION,
                f"unknown section kind {section_kind:#04x}",
            )

    ensure(code_size != 0, EofError.CODE_SECTION_MISSING)

    # Trailing bytes are not allowed
    declared_length = counter + int(code_size) + int(data_size)
    if declared_length != code_length:
        raise InvalidEof(
            EofError.INVALID_TOTAL_SIZE,
            f"header declares {declared_length} bytes, code has {code_length}",
        )

    return Eof1Header(code_size=code_size, data_size=data_size)


def validate_eof(code: Bytes) -> bool:
    """
    Check whether the code is a valid EOF1 container.

    Parameters
    ----------
    code :
        The code to check.

    Returns
    -------
    is_valid : `bool`
        `True` if `read_eof1_header` accepts `code`.
    """
    try:
        read_eof1_header(code)
    except InvalidEof:
        return False
    return True


def read_valid_eof1_header_unchecked(code: Bytes) -> Eof1Header:
    """
    Read the header of a container that is already known to be valid.

    None of the checks of `read_eof1_header` are repeated: the sizes are
    read from their fixed offsets. `code` must have been accepted by
    `read_eof1_header` or `validate_eof` beforehand. On any other input the
    result is meaningless, or an `IndexError` is raised.

    Parameters
    ----------
    code :
        A valid EOF1 container.

    Returns
    -------
    header : `Eof1Header`
        The sizes of the code and data sections.
    """
    code_size = U16.from_be_bytes(
        code[CODE_SIZE_OFFSET : CODE_SIZE_OFFSET + SECTION_SIZE_LENGTH]
    )
    data_size = U16(0)
    if code[CODE_SIZE_OFFSET + SECTION_SIZE_LENGTH] == SectionKind.DATA:
        data_size_offset = CODE_SIZE_OFFSET + SECTION_SIZE_LENGTH + 1
        data_size = U16.from_be_bytes(
            code[data_size_offset : data_size_offset + SECTION_SIZE_LENGTH]
        )
    return Eof1Header(code_size=code_size, data_size=data_size)


def get_code_section(code: Bytes, header: Eof1Header) -> Bytes:
    """
    Get the contents of the code section. `header` must have been read from
    `code`.
    """
    start = int(header.body_start_index)
    return code[start : start + int(header.code_size)]


def get_data_section(code: Bytes, header: Eof1Header) -> Bytes:
    """
    Get the contents of the data section, or empty bytes if the container
    has none. `header` must have been read from `code`.
    """
    start = int(header.body_start_index) + int(header.code_size)
    return code[start : start + int(header.data_size)]
