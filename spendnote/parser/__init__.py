# -*- coding: utf-8 -*-
"""
Local transaction parser.

Turns one short English or Vietnamese entry into a ParsedTransaction without
calling any external service. The only failure is a missing amount, raised as
ParserError(NO_AMOUNT_FOUND) so the caller can escalate to the remote
normalizer.

Main entry:
- parse(raw_input, input_mode, language, fallback_currency, preferred_type=None)

Usage:
    from spendnote.parser import parse
    tx = parse("cafe 45k", "text", "vi", "VND")
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from spendnote.parser.types import Currency, InputMode, Language, TransactionType, input_mode_tag
from spendnote.parser.errors import ParserError, ParserErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedTransaction:
    """Structured result of parsing one entry. The caller assigns id and timestamps."""

    type: TransactionType
    amount: float                          # always > 0
    currency: Currency
    category: str
    date: str                              # YYYY-MM-DD
    note: str                              # original input, verbatim
    input_mode: str                        # provenance tag from the caller
    raw_input: str                         # original input, verbatim
    merchant: Optional[str] = None         # only filled by the remote normalizer

    def to_dict(self) -> dict:
        """Wire format shared with the remote normalizer."""
        return {
            "type": self.type.value,
            "amount": self.amount,
            "currency": self.currency.value,
            "category": self.category,
            "merchant": self.merchant,
            "date": self.date,
            "note": self.note,
            "inputMode": self.input_mode,
            "rawInput": self.raw_input,
        }


def parse(
    raw_input: str,
    input_mode="text",
    language=Language.EN,
    fallback_currency=Currency.VND,
    preferred_type: Optional[TransactionType] = None,
    *,
    context_date: Optional[datetime] = None,
) -> ParsedTransaction:
    """
    Parse a free-text entry into a ParsedTransaction.

    Args:
        raw_input: the entry as typed, transcribed or read from a receipt
        input_mode: provenance tag ("manual", "text", "voice", "image")
        language: "en" or "vi"; selects category labels and error messages
        fallback_currency: used when the text carries no currency cue
        preferred_type: caller-chosen type that overrides keyword inference
        context_date: reference time for relative dates (defaults to now)

    Returns:
        ParsedTransaction

    Raises:
        ParserError: no valid amount in the text
    """
    from spendnote.parser.detect_currency import detect_currency
    from spendnote.parser.extract_amount import extract_amount
    from spendnote.parser.extract_type import classify_type
    from spendnote.parser.extract_category import classify_category
    from spendnote.parser.extract_date import normalize_date

    lang = Language.from_string(language)
    text = raw_input or ""

    # 1. Currency
    currency = detect_currency(text, Currency.from_string(fallback_currency))

    # 2. Amount (the only stage that can fail)
    amount = extract_amount(text, currency)
    if not amount or amount <= 0:
        logger.debug(f"No amount found in {text!r}")
        raise ParserError.from_code(ParserErrorCode.NO_AMOUNT_FOUND, language=lang)

    # 3. Type, then category for that type
    tx_type = classify_type(text, preferred_type)
    category = classify_category(text, lang, tx_type)

    # 4. Date
    date_str = normalize_date(text, context_date)

    tx = ParsedTransaction(
        type=tx_type,
        amount=amount,
        currency=currency,
        category=category,
        date=date_str,
        note=raw_input,
        input_mode=input_mode_tag(input_mode),
        raw_input=raw_input,
    )
    logger.debug(f"Parsed {text!r} -> {tx.to_dict()}")
    return tx


# Export
__all__ = [
    "parse",
    "ParsedTransaction",
    "TransactionType",
    "Currency",
    "Language",
    "InputMode",
    "ParserError",
    "ParserErrorCode",
]
