import datetime
from decimal import Decimal
import json
import uuid

from curlbridge.utils.coercion import coerce_bool
from curlbridge.utils.encoder import CurlbridgeJSONEncoder


def dumps(value) -> str:
    return json.dumps(value, cls=CurlbridgeJSONEncoder)


def test_decimal():
    assert dumps(Decimal("1.5")) == "1.5"
    assert dumps(Decimal("2")) == "2", "Expected whole decimals to encode as ints."


def test_datetime():
    assert dumps(datetime.datetime(2024, 1, 2, 3, 4, 5)) == '"2024-01-02T03:04:05"'
    assert dumps(datetime.date(2024, 1, 2)) == '"2024-01-02"'


def test_uuid():
    value = uuid.UUID("12345678-1234-5678-1234-567812345678")

    assert dumps(value) == '"12345678-1234-5678-1234-567812345678"'


def test_set():
    assert dumps(frozenset(["a"])) == '["a"]'


def test_unknown_type():
    class Thing:
        def __str__(self):
            return "thing"

    assert dumps({"t": Thing()}) == '{"t": "thing"}'


def test_coerce_bool():
    assert coerce_bool("1") is True
    assert coerce_bool("True") is True
    assert coerce_bool(" yes ") is True
    assert coerce_bool("false") is False
    assert coerce_bool(0) is False
