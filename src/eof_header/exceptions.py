"""
EOF Exceptions
^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Error kinds reported while reading the header of an EOF container, and the
exceptions that carry them.
"""

from enum import Enum, auto, unique
from typing import Final, Optional


@unique
class EofError(Enum):
    """
    Closed set of reasons an EOF1 header is rejected.
    """

    INVALID_FORMAT_BYTE = auto()
    """
    Code is empty or does not start with the `0xEF` format byte.
    """
    INVALID_MAGIC = auto()
    """
    Magic bytes following the format byte are missing or wrong.
    """
    INVALID_VERSION = auto()
    """
    Version byte is missing or is not a supported version.
    """
    CODE_SECTION_MISSING = auto()
    """
    Header does not declare a code section.
    """
    CODE_SECTION_SIZE_MISSING = auto()
    """
    Code section declaration is truncated before its two size bytes.
    """
    MULTIPLE_CODE_SECTIONS = auto()
    """
    Header declares more than one code section.
    """
    EMPTY_CODE_SECTION = auto()
    """
    Code section is declared with size zero.
    """
    DATA_SECTION_BEFORE_CODE_SECTION = auto()
    """
    Data section is declared before any code section.
    """
    DATA_SECTION_SIZE_MISSING = auto()
    """
    Data section declaration is truncated before its two size bytes.
    """
    MULTIPLE_DATA_SECTIONS = auto()
    """
    Header declares more than one data section.
    """
    EMPTY_DATA_SECTION = auto()
    """
    Data section is declared with size zero.
    """
    UNKNOWN_SECTION = auto()
    """
    Header contains a section kind other than terminator, code or data.
    """
    INVALID_TOTAL_SIZE = auto()
    """
    Declared section sizes do not add up to the length of the code.
    """

    @classmethod
    def from_str(cls, value: "str | EofError") -> "EofError":
        """
        Parse the `EofError.NAME` form produced by `str()`.
        """
        if isinstance(value, EofError):
            return value

        class_name, _, enum_name = value.partition(".")
        if class_name != cls.__name__:
            raise ValueError(
                f"Unexpected error type: {class_name}, expected {cls.__name__}"
            )

        error = cls.__members__.get(enum_name)
        if error is None:
            raise ValueError(f"No such error in {class_name}: {value}")
        return error

    def __str__(self) -> str:
        """Return string representation of the error kind."""
        return f"{self.__class__.__name__}.{self.name}"


class EofException(Exception):
    """
    Base class for all exceptions _expected_ to be thrown while handling EOF
    code.
    """


class InvalidEof(EofException):
    """
    Thrown when the header of an EOF container is found to be invalid.
    """

    error: Final[EofError]
    """
    The rule the container violated.
    """

    def __init__(self, error: EofError, message: Optional[str] = None):
        if message is None:
            message = error.name.lower().replace("_", " ")
        super().__init__(f"{error}: {message}")
        self.error = error
