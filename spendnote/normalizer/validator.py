# -*- coding: utf-8 -*-
"""
Validation helpers for remote normalizer results.
"""

import logging
from datetime import date, datetime
from typing import Optional

from spendnote.normalizer.errors import NormalizerError
from spendnote.parser import ParsedTransaction
from spendnote.parser.extract_date import current_datetime
from spendnote.parser.lexicons import default_categories
from spendnote.parser.types import Currency, Language, TransactionType

logger = logging.getLogger(__name__)


def validate_amount(value) -> float:
    """Amount must be a positive number."""
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise NormalizerError(f"Invalid amount: {value!r}")
    if not amount > 0:
        raise NormalizerError(f"Amount must be positive: {value!r}")
    return amount


def validate_date(value, today: date) -> str:
    """
    Keep a valid YYYY-MM-DD date; anything else becomes today.
    """
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10]).isoformat()
        except ValueError:
            pass
    if value:
        logger.warning(f"Invalid date '{value}' from normalizer, using today")
    return today.isoformat()


def to_parsed_transaction(
    payload: dict,
    raw: str,
    input_mode: str = "text",
    language=Language.EN,
    *,
    context_date: Optional[datetime] = None,
) -> ParsedTransaction:
    """
    Turn a normalizer answer into a ParsedTransaction.

    Raises:
        NormalizerError: amount, currency or type missing or invalid
    """
    if not payload.get("amount") or not payload.get("currency") or not payload.get("type"):
        raise NormalizerError("Normalizer output missing required fields")

    try:
        currency = Currency.from_string(payload["currency"])
        tx_type = TransactionType.from_string(payload["type"])
    except ValueError as e:
        raise NormalizerError(str(e)) from e
    amount = validate_amount(payload["amount"])

    lang = Language.from_string(language)
    category = str(payload.get("category") or "").strip()
    if not category:
        category = default_categories()[tx_type.value][lang.value]

    merchant = str(payload.get("merchant") or "").strip() or None

    today = (context_date or current_datetime()).date()

    return ParsedTransaction(
        type=tx_type,
        amount=amount,
        currency=currency,
        category=category,
        date=validate_date(payload.get("date"), today),
        note=payload.get("note") or raw,
        input_mode=input_mode,
        raw_input=payload.get("rawInput") or raw,
        merchant=merchant,
    )
