import pytest

from eof_header.exceptions import EofError, InvalidEof
from eof_header.format import (
    EofVersion,
    get_eof_version,
    has_eof_magic,
    has_format_byte,
    is_eof_code,
)
from eof_header.utils.hexadecimal import hex_to_bytes


@pytest.mark.parametrize(
    "code, expected",
    [
        ("", False),
        ("EF", True),
        ("FE", False),
        ("00EF", False),
        ("EFCAFE01", True),
    ],
)
def test_has_format_byte(code: str, expected: bool) -> None:
    assert has_format_byte(hex_to_bytes(code)) is expected


@pytest.mark.parametrize(
    "code, expected",
    [
        ("", False),
        ("EF", False),
        ("EFCA", False),
        ("EFCAFF", False),
        ("EFCAFE", True),
        ("00CAFE", True),
        ("EFCAFE0101000200", True),
    ],
)
def test_has_eof_magic(code: str, expected: bool) -> None:
    assert has_eof_magic(hex_to_bytes(code)) is expected


@pytest.mark.parametrize(
    "code, expected",
    [
        ("", False),
        ("EF", False),
        ("00CAFE", False),
        ("EFCAFF", False),
        ("EFCAFE", True),
        ("EFCAFE02", True),
        ("6000", False),
    ],
)
def test_is_eof_code(code: str, expected: bool) -> None:
    assert is_eof_code(hex_to_bytes(code)) is expected


@pytest.mark.parametrize(
    "code",
    ["", "6000", "EF", "EFCAFF01", "FECAFE01"],
)
def test_get_eof_version_legacy(code: str) -> None:
    assert get_eof_version(hex_to_bytes(code)) is EofVersion.LEGACY


def test_get_eof_version_eof1() -> None:
    code = hex_to_bytes("EFCAFE010100010000")
    assert get_eof_version(code) is EofVersion.EOF1


@pytest.mark.parametrize("code", ["EFCAFE", "EFCAFE00", "EFCAFE02"])
def test_get_eof_version_invalid(code: str) -> None:
    with pytest.raises(InvalidEof) as exc_info:
        get_eof_version(hex_to_bytes(code))
    assert exc_info.value.error is EofError.INVALID_VERSION
