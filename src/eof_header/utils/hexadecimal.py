"""
Utility Functions For Hexadecimal Strings
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. contents:: Table of Contents
    :backlinks: none
    :local:

Introduction
------------

Conversions between bytecode and the hex strings it is usually written as.
"""
from ethereum_types.bytes import Bytes


def has_hex_prefix(hex_string: str) -> bool:
    """
    Check if a hex string starts with hex prefix (0x or 0X).

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be checked for presence of prefix.

    Returns
    -------
    has_prefix : `bool`
        Boolean indicating whether the hex string has a 0x prefix.
    """
    return hex_string[:2] in ("0x", "0X")


def remove_hex_prefix(hex_string: str) -> str:
    """
    Remove the 0x prefix from a hex string if present.

    Parameters
    ----------
    hex_string :
        The hexadecimal string whose prefix is to be removed.

    Returns
    -------
    modified_hex_string : `str`
        The hexadecimal string with the 0x prefix removed if present.
    """
    if has_hex_prefix(hex_string):
        return hex_string[len("0x") :]

    return hex_string


def hex_to_bytes(hex_string: str) -> Bytes:
    """
    Convert a hex string, with or without prefix, to bytes. Surrounding
    whitespace is ignored and both letter cases are accepted.

    Parameters
    ----------
    hex_string :
        The hexadecimal string to be converted to bytes.

    Returns
    -------
    byte_stream : `bytes`
        Byte stream corresponding to the given hexadecimal string.

    Raises
    ------
    ValueError
        If the string is not an even-length run of hex digits.
    """
    return bytes.fromhex(remove_hex_prefix(hex_string.strip()))


def bytes_to_hex(value: Bytes) -> str:
    """
    Convert bytes to an upper case hex string without prefix, the form EOF
    test vectors are written in.
    """
    return value.hex().upper()
