import pytest

from product_api.api.dependencies import clamp_count, clamp_start, parse_int, product_id_path
from product_api.infrastructure.exceptions import (
    ErrorKind,
    InvalidPayloadError,
    InvalidProductIDError,
    ProductNotFoundError,
    StoreError,
)


@pytest.mark.parametrize("value, expected", [
    ("7", 7),
    ("+7", 7),
    ("-7", -7),
    ("007", 7),
    (None, None),
    ("", None),
    (" 7", None),
    ("1_000", None),
    ("7.0", None),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("1", 1),
    ("10", 10),
    ("5", 5),
    ("0", 10),
    ("11", 10),
    ("-3", 10),
    (None, 10),
    ("ten", 10),
])
def test_clamp_count(value, expected):
    assert clamp_count(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("0", 0),
    ("25", 25),
    ("-5", 0),
    (None, 0),
    ("x", 0),
])
def test_clamp_start(value, expected):
    assert clamp_start(value) == expected


def test_product_id_path_accepts_digits():
    assert product_id_path("42") == 42
    assert product_id_path(str(2 ** 63 - 1)) == 2 ** 63 - 1


@pytest.mark.parametrize("value", ["abc", "-1", "+1", "1.0", "", str(2 ** 63)])
def test_product_id_path_rejects(value):
    with pytest.raises(InvalidProductIDError):
        product_id_path(value)


@pytest.mark.parametrize("error, kind, status, message", [
    (InvalidProductIDError(), ErrorKind.INVALID_INPUT, 400, "Invalid product ID"),
    (InvalidPayloadError(), ErrorKind.INVALID_INPUT, 400, "Invalid request payload"),
    (ProductNotFoundError(), ErrorKind.NOT_FOUND, 404, "Product not found"),
    (StoreError("connection refused"), ErrorKind.INTERNAL, 500, "connection refused"),
])
def test_error_taxonomy(error, kind, status, message):
    assert error.kind is kind
    assert error.kind.status_code == status
    assert error.message == message
    assert str(error) == message
