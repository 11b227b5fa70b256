"""Shared test fixtures."""

import json

import pytest

from jsonaccessors import JsonCtx

TRADE_DOCUMENT = {
    "tradeDetails": {
        "leg1Details": {"priceCurrency": "EUR", "notional": 1000000},
        "leg2Details": {"priceCurrency": "USD", "notional": 500000},
    }
}

NESTED_DOCUMENT = {
    "a": {"b": 1, "c": [1, 2]},
    "d": [{"e": "x"}, {"e": "y"}],
}


@pytest.fixture
def trade_document():
    return json.loads(json.dumps(TRADE_DOCUMENT))


@pytest.fixture
def nested_document():
    return json.loads(json.dumps(NESTED_DOCUMENT))


@pytest.fixture
def trade_file(tmp_path):
    path = tmp_path / "example.json"
    path.write_text(json.dumps(TRADE_DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture
def trade_ctx(trade_document):
    return JsonCtx(trade_document)
