"""Conformance tests against the TypeID v0.3.0 reference tables."""

from pathlib import Path
from uuid import UUID

import pytest
import yaml

from typeid.core import codec
from typeid.core.api import create, explain, parse
from typeid.core.errors import TypeIDError

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_cases(filename):
    """Load a conformance table from tests/fixtures."""
    with open(FIXTURES_DIR / filename, encoding="utf-8") as file:
        return yaml.safe_load(file)


VALID_CASES = load_cases("valid.yml")
INVALID_CASES = load_cases("invalid.yml")


def _ids(cases):
    return [case["name"] for case in cases]


class TestValidCases:
    """Reference encodings must match byte for byte."""

    @pytest.mark.parametrize("case", VALID_CASES, ids=_ids(VALID_CASES))
    def test_encode(self, case):
        """UUID plus prefix encodes to the expected TypeID."""
        uuid_bytes = codec.hex_to_uuid(case["uuid"])
        assert codec.encode(uuid_bytes, case["prefix"]) == case["typeid"]
        assert create(case["prefix"], UUID(case["uuid"])) == case["typeid"]

    @pytest.mark.parametrize("case", VALID_CASES, ids=_ids(VALID_CASES))
    def test_decode(self, case):
        """TypeID parses back to the expected prefix and UUID."""
        parts = parse(case["typeid"])
        assert parts.prefix == case["prefix"]
        assert codec.uuid_to_hex(parts.uuid.bytes) == case["uuid"].replace("-", "")
        assert explain(case["typeid"]) is None

    @pytest.mark.parametrize("case", VALID_CASES, ids=_ids(VALID_CASES))
    def test_round_trip(self, case):
        """parse then encode reproduces the original TypeID."""
        parts = parse(case["typeid"])
        assert codec.encode(parts.uuid.bytes, parts.prefix) == case["typeid"]


class TestInvalidCases:
    """Reference rejections must raise and explain."""

    @pytest.mark.parametrize("case", INVALID_CASES, ids=_ids(INVALID_CASES))
    def test_rejected(self, case):
        """parse raises and explain returns a record of the expected kind."""
        with pytest.raises(TypeIDError) as exc_info:
            parse(case["typeid"])
        assert exc_info.value.kind.value == case["kind"]

        record = explain(case["typeid"])
        assert record is not None, case["description"]
        assert record.kind.value == case["kind"], case["description"]
        assert isinstance(record.message, str)
        assert record.input == case["typeid"]
