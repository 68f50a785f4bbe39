# -*- coding: utf-8 -*-
"""
Unit tests for detect_currency module.
"""

import pytest
from spendnote.parser.detect_currency import detect_currency
from spendnote.parser.types import Currency


class TestDetectCurrency:

    @pytest.mark.parametrize("text", ["lunch $12", "lunch 8 usd", "Lunch 8 USD", "5 dollars tip"])
    def test_usd_cues(self, text):
        assert detect_currency(text, Currency.VND) == Currency.USD

    @pytest.mark.parametrize(
        "text",
        ["cafe 45k", "lương 20tr", "phở 50.000đ", "rent 8.000.000 VND", "2 triệu", "50 nghìn", "50 ngan", "50.000₫"],
    )
    def test_vnd_cues(self, text):
        assert detect_currency(text, Currency.USD) == Currency.VND

    def test_usd_checked_first(self):
        """45k usd -> USD cues win"""
        assert detect_currency("45k usd", Currency.VND) == Currency.USD

    @pytest.mark.parametrize("fallback", [Currency.USD, Currency.VND])
    def test_fallback_when_no_cue(self, fallback):
        assert detect_currency("coffee 3", fallback) == fallback

    def test_fallback_string(self):
        assert detect_currency("coffee 3", "usd") == Currency.USD

    def test_empty_text(self):
        assert detect_currency("", Currency.VND) == Currency.VND
