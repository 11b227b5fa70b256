"""Collector accessor tests."""

import pytest

from jsonaccessors import (
    JsonCtx,
    MissingKeyError,
    TypeMismatchError,
    bind,
    generate_from_value,
)
from jsonaccessors._walker import Leaf, walk_document
from jsonaccessors.schema import ValueType


def _orders():
    return {
        "orders": [
            {"id": "a", "total": 10, "lines": [{"sku": "x"}]},
            {"id": "b", "total": 20.5, "lines": [{"sku": "y"}, {"sku": "z"}]},
        ]
    }


class TestCollectorLeaves:
    def test_disabled_by_default(self):
        leaves = walk_document(_orders())
        assert all(leaf.each is None for leaf in leaves)

    def test_shared_scalar_suffixes_collected(self):
        leaves = walk_document(_orders(), collectors=True)
        collected = [leaf for leaf in leaves if leaf.each is not None]
        assert Leaf(("orders",), ValueType.STRING_LIST, ("id",)) in collected
        assert Leaf(("orders",), ValueType.NUMBER_LIST, ("total",)) in collected

    def test_nested_array_collects_per_element(self):
        leaves = walk_document(_orders(), collectors=True)
        collected = {(leaf.path, leaf.each) for leaf in leaves if leaf.each is not None}
        assert (("orders", "1", "lines"), ("sku",)) in collected
        # lines.1.sku exists only in the second order
        assert (("orders",), ("lines", "0", "sku")) in collected
        assert (("orders",), ("lines", "1", "sku")) not in collected

    def test_suffix_with_differing_types_skipped(self):
        doc = {"xs": [{"v": 1}, {"v": "one"}]}
        leaves = walk_document(doc, collectors=True)
        assert all(leaf.each is None for leaf in leaves)


class TestCollectorAccessors:
    def test_identifier(self):
        specs = generate_from_value(_orders(), collectors=True)
        assert "orders_each_total" in [s.identifier for s in specs]

    def test_collects_every_element(self):
        accessors = bind(generate_from_value(_orders(), collectors=True))
        ctx = JsonCtx(_orders())
        assert accessors.orders_each_total(ctx) == [10.0, 20.5]
        assert accessors.orders_each_id(ctx) == ["a", "b"]

    def test_uses_runtime_length(self):
        accessors = bind(generate_from_value(_orders(), collectors=True))
        ctx = JsonCtx({"orders": [{"id": "p"}, {"id": "q"}, {"id": "r"}]})
        assert accessors.orders_each_id(ctx) == ["p", "q", "r"]

    def test_missing_field_fails_whole_call(self):
        accessors = bind(generate_from_value(_orders(), collectors=True))
        ctx = JsonCtx({"orders": [{"id": "p"}, {"total": 1}]})
        with pytest.raises(MissingKeyError):
            accessors.orders_each_id(ctx)

    def test_type_drift_reports_element(self):
        accessors = bind(generate_from_value(_orders(), collectors=True))
        ctx = JsonCtx({"orders": [{"total": 1}, {"total": "2"}]})
        with pytest.raises(TypeMismatchError) as exc_info:
            accessors.orders_each_total(ctx)
        assert exc_info.value.index == 1

    def test_non_array_fails(self):
        accessors = bind(generate_from_value(_orders(), collectors=True))
        with pytest.raises(TypeMismatchError):
            accessors.orders_each_id(JsonCtx({"orders": {"id": "a"}}))
