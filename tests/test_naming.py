"""Identifier derivation tests."""

import pytest

from jsonaccessors._errors import IdentifierCollisionError, InvalidIdentifierError
from jsonaccessors._naming import (
    check_collisions,
    concat_path,
    sanitize,
    validate_identifier,
)
from jsonaccessors._walker import walk_document
from jsonaccessors.schema import ValueType, synthesize


class TestSanitize:
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("plain", "plain"),
            ("with space", "with_space"),
            ("kebab-case", "kebab_case"),
            ("dotted.key", "dotted_key"),
            ("a/b", "a_b"),
            (" -./", "____"),
            ("42", "42"),
            ("colon:kept", "colon:kept"),
        ],
    )
    def test_sanitize(self, segment, expected):
        assert sanitize(segment) == expected


class TestConcatPath:
    def test_root(self):
        assert concat_path(()) == "root"

    def test_joins_with_underscore(self):
        assert concat_path(("tradeDetails", "leg1Details", "notional")) == (
            "tradeDetails_leg1Details_notional"
        )

    def test_index_segments(self):
        assert concat_path(("d", "0", "e")) == "d_0_e"

    def test_sanitizes_each_segment(self):
        assert concat_path(("price currency", "sub-key")) == "price_currency_sub_key"


class TestInjectivity:
    def test_distinct_leaves_get_distinct_identifiers(self):
        doc = {
            "a b": {"0": "x", "1": "y"},
            "a": [{"b": 1}, {"b": 2}],
            "c-d": {"e.f": True, "g/h": ["s"]},
            "c": {"d0": 1},
        }
        specs = [synthesize(l.path, l.value_type) for l in walk_document(doc)]
        identifiers = [s.identifier for s in specs]
        assert len(identifiers) == len(set(identifiers))
        check_collisions(specs)

    def test_sanitized_collision_detected(self):
        specs = [
            synthesize(("a-b",), ValueType.STRING),
            synthesize(("a.b",), ValueType.NUMBER),
        ]
        with pytest.raises(IdentifierCollisionError) as exc_info:
            check_collisions(specs)
        assert exc_info.value.identifier == "a_b"
        assert exc_info.value.paths == (("a-b",), ("a.b",))

    def test_key_versus_nested_path_collision(self):
        specs = [
            synthesize(("a_b",), ValueType.STRING),
            synthesize(("a", "b"), ValueType.STRING),
        ]
        with pytest.raises(IdentifierCollisionError):
            check_collisions(specs)


class TestValidateIdentifier:
    def test_valid(self):
        validate_identifier("tradeDetails_leg1Details_notional")

    @pytest.mark.parametrize("name", ["0_name", "a:b", "", "naïve-ish"])
    def test_invalid_characters(self, name):
        with pytest.raises(InvalidIdentifierError):
            validate_identifier(name)

    def test_keyword(self):
        with pytest.raises(InvalidIdentifierError, match="not a valid Python name"):
            validate_identifier("class")

    def test_reserved(self):
        with pytest.raises(InvalidIdentifierError) as exc_info:
            validate_identifier("helper", reserved={"helper"})
        assert "shadows" in exc_info.value.internal()
