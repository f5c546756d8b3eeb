import json
import logging
from io import StringIO
from pathlib import Path
from typing import List, Tuple

import pytest

from eof_header import __version__
from eof_header_tools import create_parser, main
from tests.helpers import fetch_eof_tests, idfn

VALID_CODES = (
    "EFCAFE010100010000",
    "0xEFCAFE01010002020001006000AA",
)


def run_tool(args: List[str], input_text: str = "") -> Tuple[int, List[str]]:
    out_file = StringIO()
    exit_code = main(args, out_file, StringIO(input_text))
    return exit_code, out_file.getvalue().splitlines()


def test_validate_all_valid() -> None:
    exit_code, lines = run_tool(["validate"], "\n".join(VALID_CODES))

    assert exit_code == 0
    assert lines == ["valid", "valid"]


def test_validate_reports_error_kind() -> None:
    exit_code, lines = run_tool(
        ["validate"], "EFCAFE010100010000\nEF\nEFCAFE03\n"
    )

    assert exit_code == 1
    assert lines == [
        "valid",
        "invalid: EofError.INVALID_MAGIC",
        "invalid: EofError.INVALID_VERSION",
    ]


def test_header_prints_json() -> None:
    exit_code, lines = run_tool(
        ["header"], "EFCAFE01010002020004006000AABBCCDD\n6000\n"
    )

    assert exit_code == 1
    assert json.loads(lines[0]) == {"codeSize": 2, "dataSize": 4}
    assert json.loads(lines[1]) == {"error": "EofError.INVALID_FORMAT_BYTE"}


def test_blank_lines_and_comments_are_skipped() -> None:
    input_text = "# a comment\n\nEFCAFE010100010000  # minimal\n   \n"

    exit_code, lines = run_tool(["validate"], input_text)

    assert exit_code == 0
    assert lines == ["valid"]


def test_invalid_hex_is_fatal() -> None:
    exit_code, lines = run_tool(["validate"], "EFCAFE010100010000\nXYZ\n")

    assert exit_code == 2
    assert lines == ["valid"]


def test_reads_from_file(tmp_path: Path) -> None:
    path = tmp_path / "codes.txt"
    path.write_text("\n".join(VALID_CODES) + "\nEFCAFE0101000000\n")

    exit_code, lines = run_tool(["header", str(path)])

    assert exit_code == 1
    assert [json.loads(line) for line in lines] == [
        {"codeSize": 1, "dataSize": 0},
        {"codeSize": 2, "dataSize": 1},
        {"error": "EofError.EMPTY_CODE_SECTION"},
    ]


def test_missing_file_is_fatal(tmp_path: Path) -> None:
    exit_code, lines = run_tool(["validate", str(tmp_path / "missing.txt")])

    assert exit_code == 2
    assert lines == []


# Blank lines are skipped by the tool, so the empty code vector is left out
@pytest.mark.parametrize(
    "test_case",
    [t for t in fetch_eof_tests() if t["vector"]["code"]],
    ids=idfn,
)
def test_header_matches_vectors(test_case: dict) -> None:
    exit_code, lines = run_tool(["header"], test_case["vector"]["code"])

    vector = test_case["vector"]
    if "exception" in vector:
        assert exit_code == 1
        assert json.loads(lines[0]) == {"error": vector["exception"]}
    else:
        assert exit_code == 0
        assert json.loads(lines[0]) == {
            "codeSize": vector["codeSize"],
            "dataSize": vector["dataSize"],
        }


def test_verbose_logs_every_input(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="EOF"):
        run_tool(["--verbose", "validate"], "EFCAFE010100010000\nEF\n")

    messages = [record.getMessage() for record in caplog.records]
    assert "line 1: code size 1, data size 0" in messages
    assert any(m.startswith("line 2: EF rejected") for m in messages)
    assert "1 of 2 inputs valid" in messages


def test_quiet_hides_summary(caplog: pytest.LogCaptureFixture) -> None:
    run_tool(["--quiet", "validate"], "EFCAFE010100010000\n")

    assert "1 of 1 inputs valid" not in caplog.messages


def test_no_tool_prints_help() -> None:
    exit_code, lines = run_tool([])

    assert exit_code == 0
    assert any("validate" in line for line in lines)


def test_version(capsys: pytest.CaptureFixture) -> None:
    parser = create_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["--version"])

    assert __version__ in capsys.readouterr().out
