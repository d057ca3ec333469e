"""Tests for request validation rules."""
from datetime import date
from uuid import uuid4

import pytest
from pydantic import ValidationError

from bookstock.models.book_model import CreateBookRequest, UpdateBookRequest


class TestCreateBookRequest:
    def test_valid_payload(self, hujan_payload):
        request = CreateBookRequest(**hujan_payload)

        assert request.isbn == "9783161484100"
        assert request.published_at == date(2016, 1, 28)
        assert request.stock == 200

    def test_zero_stock_is_allowed(self, hujan_payload):
        assert CreateBookRequest(**{**hujan_payload, "stock": 0}).stock == 0

    @pytest.mark.parametrize(
        "field,value",
        [
            ("isbn", "9783161484101"),
            ("isbn", "abc"),
            ("title", ""),
            ("author", "   "),
            ("publisher", ""),
            ("published_at", "28-01-2016"),
            ("stock", -1),
        ],
    )
    def test_invalid_field(self, hujan_payload, field, value):
        with pytest.raises(ValidationError) as exc_info:
            CreateBookRequest(**{**hujan_payload, field: value})

        assert exc_info.value.errors()[0]["loc"][0] == field

    @pytest.mark.parametrize("field", ["isbn", "title", "author", "publisher", "published_at", "stock"])
    def test_missing_field(self, hujan_payload, field):
        payload = dict(hujan_payload)
        payload.pop(field)

        with pytest.raises(ValidationError):
            CreateBookRequest(**payload)


class TestUpdateBookRequest:
    def test_only_book_id_required(self):
        request = UpdateBookRequest(book_id=uuid4())

        assert request.changes() == {
            "isbn": None,
            "title": None,
            "author": None,
            "publisher": None,
            "published_at": None,
            "stock": None,
        }

    def test_stock_minus_one_means_unchanged(self):
        request = UpdateBookRequest(book_id=uuid4(), stock=-1)

        assert request.stock is None

    def test_stock_zero_is_a_real_value(self):
        assert UpdateBookRequest(book_id=uuid4(), stock=0).stock == 0

    def test_other_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookRequest(book_id=uuid4(), stock=-2)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookRequest(book_id=uuid4(), title="")

    def test_invalid_isbn_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookRequest(book_id=uuid4(), isbn="123")

    def test_book_id_must_be_uuid(self):
        with pytest.raises(ValidationError):
            UpdateBookRequest(book_id="not-a-uuid")


class TestStockBounds:
    def test_create_stock_above_bigint_rejected(self, hujan_payload):
        with pytest.raises(ValidationError):
            CreateBookRequest(**{**hujan_payload, "stock": 2**63})

    def test_create_stock_at_bigint_max(self, hujan_payload):
        assert CreateBookRequest(**{**hujan_payload, "stock": 2**63 - 1}).stock == 2**63 - 1

    def test_update_stock_above_bigint_rejected(self):
        with pytest.raises(ValidationError):
            UpdateBookRequest(book_id=uuid4(), stock=10**20)
