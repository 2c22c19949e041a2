import os

import pytest

import json_parser as jp

TEST_DIR = os.path.dirname(__file__)

# List all .json files in documents/
json_files = sorted(f for f in os.listdir(TEST_DIR) if f.endswith(".json"))

VALID_FILES = [f for f in json_files if f.startswith("pass")]
INVALID_FILES = [f for f in json_files if f.startswith("fail")]

# Hard fail if test files are missing
if not VALID_FILES:
    raise RuntimeError("No pass*.json files found in documents directory")
if not INVALID_FILES:
    raise RuntimeError("No fail*.json files found in documents directory")


def _read(filename):
    with open(os.path.join(TEST_DIR, filename), "r", encoding="utf-8", newline="") as f:
        return f.read()


@pytest.mark.parametrize("filename", VALID_FILES)
def test_valid_document_parses(filename):
    root = jp.parse_json(_read(filename))
    assert isinstance(root, (jp.JsonObject, jp.JsonArray)), f"Unexpected root from {filename}"


@pytest.mark.parametrize("filename", INVALID_FILES)
def test_invalid_document_raises(filename):
    with pytest.raises(jp.JsonError):
        jp.parse_json(_read(filename))


def test_pass1_keeps_duplicate_keys_and_raw_escapes():
    root = jp.parse_json(_read("pass1.json"))
    assert root.keys().count("dup") == 2
    assert root.get("escaped") == jp.JsonString('say \\"hi\\" \\\\ é')
    assert root.to_python()["dup"] == 2.0


def test_pass4_number_forms():
    root = jp.parse_json(_read("pass4.json"))
    assert root.to_python() == [1.0, 2.0, 0.5, 5.0, 7.0, 6.02e23, "x"]


def test_pass5_stops_after_root_value():
    assert jp.parse_json(_read("pass5.json")).to_python() == [1.0]
