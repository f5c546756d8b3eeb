import json
import os
from glob import glob
from typing import Any, Dict, Generator

from eof_header.utils.hexadecimal import hex_to_bytes

EOF1_FIXTURES_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "fixtures",
    "eof1",
)


def fetch_eof_tests(test_dir: str = EOF1_FIXTURES_PATH) -> Generator:
    """
    Yield every vector in the JSON files under `test_dir`, tagged with the
    file and test it came from.
    """
    for full_path in sorted(glob(os.path.join(test_dir, "*.json"))):
        with open(full_path, "r") as file:
            data = json.load(file)
        for test_name, test in data.items():
            for key, vector in test["vectors"].items():
                yield {
                    "test_file": os.path.basename(full_path),
                    "test_name": test_name,
                    "test_key": key,
                    "vector": vector,
                }


def fetch_valid_eof_tests() -> Generator:
    return (t for t in fetch_eof_tests() if "exception" not in t["vector"])


def fetch_invalid_eof_tests() -> Generator:
    return (t for t in fetch_eof_tests() if "exception" in t["vector"])


# Test case Identifier
def idfn(test_case: Any) -> str:
    if isinstance(test_case, dict):
        return test_case["test_name"] + " - " + test_case["test_key"]
    return str(test_case)


def vector_code(test_case: Dict) -> bytes:
    return hex_to_bytes(test_case["vector"]["code"])
