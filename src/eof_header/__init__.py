"""
EOF1 Header Reader
^^^^^^^^^^^^^^^^^^

The Ethereum Object Format ([EIP-3540]) wraps EVM bytecode in a container that
starts with a fixed prefix, a version byte and a list of typed sections. Code
that does not start with the prefix is legacy code and is left untouched.

This package reads the header of version 1 containers. A container is either
accepted, giving the sizes of its code and data sections, or rejected with
exactly one reason from [`EofError`]. Nothing is ever partially accepted:
missing bytes and trailing bytes are both errors.

[EIP-3540]: https://eips.ethereum.org/EIPS/eip-3540
[`EofError`]: ref:eof_header.exceptions.EofError
"""

from .container import build_eof1_container
from .exceptions import EofError, EofException, InvalidEof
from .format import (
    EofVersion,
    get_eof_version,
    has_eof_magic,
    has_format_byte,
    is_eof_code,
)
from .header import (
    Eof1Header,
    SectionKind,
    get_code_section,
    get_data_section,
    read_eof1_header,
    validate_eof,
)

__version__ = "0.1.0"

__all__ = (
    "Eof1Header",
    "EofError",
    "EofException",
    "EofVersion",
    "InvalidEof",
    "SectionKind",
    "build_eof1_container",
    "get_code_section",
    "get_data_section",
    "get_eof_version",
    "has_eof_magic",
    "has_format_byte",
    "is_eof_code",
    "read_eof1_header",
    "validate_eof",
)
