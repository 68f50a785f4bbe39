# -*- coding: utf-8 -*-
"""
Integration tests for parser module.
"""

import dataclasses

import pytest

from spendnote.parser import (
    Currency,
    InputMode,
    ParsedTransaction,
    ParserError,
    ParserErrorCode,
    TransactionType,
    parse,
)


class TestParserIntegration:
    """End-to-end tests for parse() function."""

    # === Basic parsing ===

    def test_shorthand_expense(self, vn_now):
        """cafe 45k"""
        tx = parse("cafe 45k", "text", "vi", "VND", context_date=vn_now)
        assert tx.amount == 45000
        assert tx.currency == Currency.VND
        assert tx.type == TransactionType.EXPENSE
        assert tx.category == "Ăn uống"
        assert tx.date == "2026-01-23"
        assert tx.note == "cafe 45k"
        assert tx.raw_input == "cafe 45k"
        assert tx.input_mode == "text"
        assert tx.merchant is None

    def test_usd_expense(self, vn_now):
        """lunch 8 usd"""
        tx = parse("lunch 8 usd", "manual", "en", "VND", context_date=vn_now)
        assert tx.amount == 8
        assert tx.currency == Currency.USD
        assert tx.type == TransactionType.EXPENSE
        assert tx.category == "Other Expense"

    def test_salary_income(self, vn_now):
        """lương 20tr"""
        tx = parse("lương 20tr", "voice", "vi", "USD", context_date=vn_now)
        assert tx.amount == 20_000_000
        assert tx.currency == Currency.VND
        assert tx.type == TransactionType.INCOME
        assert tx.category == "Thu nhập"

    def test_grouped_thousands(self, vn_now):
        tx = parse("rent 8.000.000 vnd", "text", "en", "VND", context_date=vn_now)
        assert tx.amount == 8_000_000
        assert tx.category == "Housing"

    def test_marker_preference(self, vn_now):
        tx = parse("table for 4 people, 250k total", "text", "en", "VND", context_date=vn_now)
        assert tx.amount == 250_000

    def test_relative_date(self, vn_now):
        tx = parse("hôm qua ăn trưa 60k", "text", "vi", "VND", context_date=vn_now)
        assert tx.date == "2026-01-22"
        assert tx.amount == 60_000

    def test_fallback_currency(self, vn_now):
        tx = parse("coffee 3.5", "text", "en", "USD", context_date=vn_now)
        assert tx.currency == Currency.USD
        assert tx.amount == 3.5

    def test_category_tie_break(self, vn_now):
        """Food and Transport cues -> Food (earlier rule)"""
        tx = parse("grab to cafe 50k", "text", "en", "VND", context_date=vn_now)
        assert tx.category == "Food & Drink"

    def test_thu_income(self, vn_now):
        tx = parse("thu 5tr", "text", "vi", "VND", context_date=vn_now)
        assert tx.type == TransactionType.INCOME
        assert tx.category == "Thu khác"
        assert tx.amount == 5_000_000

    def test_preferred_type_override(self, vn_now):
        tx = parse("ăn trưa 60k", "text", "vi", "VND", TransactionType.INCOME, context_date=vn_now)
        assert tx.type == TransactionType.INCOME
        assert tx.category == "Thu khác"

    def test_input_mode_enum(self, vn_now):
        tx = parse("cafe 45k", InputMode.VOICE, "en", "VND", context_date=vn_now)
        assert tx.input_mode == "voice"

    # === Failures ===

    @pytest.mark.parametrize("text", ["cafe sáng nay", "", "lunch with friends"])
    def test_no_amount(self, vn_now, text):
        with pytest.raises(ParserError) as exc_info:
            parse(text, "text", "en", "VND", context_date=vn_now)
        assert exc_info.value.code == ParserErrorCode.NO_AMOUNT_FOUND
        assert str(exc_info.value) == "Could not find a valid amount."

    def test_overflowing_number_is_no_amount(self, vn_now):
        with pytest.raises(ParserError) as exc_info:
            parse("9" * 400 + " usd", "image", "en", "VND", context_date=vn_now)
        assert exc_info.value.code == ParserErrorCode.NO_AMOUNT_FOUND

    def test_no_amount_vietnamese_message(self, vn_now):
        with pytest.raises(ParserError) as exc_info:
            parse("ăn trưa", "text", "vi", "VND", context_date=vn_now)
        assert exc_info.value.message == "Không tìm thấy số tiền hợp lệ."

    # === Properties ===

    @pytest.mark.parametrize(
        "text",
        ["45k", "cafe 45", "lunch 8 usd", "0.5 usd", "table for 4 people, 250k total", "15/1 phở 50k"],
    )
    def test_amount_always_positive(self, vn_now, text):
        tx = parse(text, "text", "en", "VND", context_date=vn_now)
        assert tx.amount > 0

    @pytest.mark.parametrize(
        "text",
        ["cafe 45k", "lương 20tr", "rent 8.000.000 vnd", "hôm qua ăn trưa 60k", "lunch 8 usd"],
    )
    def test_reparsing_note_is_stable(self, vn_now, text):
        first = parse(text, "text", "vi", "VND", context_date=vn_now)
        second = parse(first.note, "text", "vi", "VND", context_date=vn_now)
        assert (second.amount, second.currency, second.category) == (
            first.amount,
            first.currency,
            first.category,
        )

    def test_result_is_immutable(self, vn_now):
        tx = parse("cafe 45k", "text", "en", "VND", context_date=vn_now)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = 1

    def test_to_dict(self, vn_now):
        tx = parse("cafe 45k", "image", "en", "VND", context_date=vn_now)
        assert tx.to_dict() == {
            "type": "expense",
            "amount": 45000.0,
            "currency": "VND",
            "category": "Food & Drink",
            "merchant": None,
            "date": "2026-01-23",
            "note": "cafe 45k",
            "inputMode": "image",
            "rawInput": "cafe 45k",
        }

    def test_parsed_transaction_type(self, vn_now):
        assert isinstance(parse("45k", "text", "en", "VND", context_date=vn_now), ParsedTransaction)
