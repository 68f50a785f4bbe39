# -*- coding: utf-8 -*-
"""
Local-first Processor

Entry point for callers: runs the local parser and, only when it fails,
escalates to the remote normalizer.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from spendnote import config
from spendnote.parser import ParsedTransaction, ParserError, parse
from spendnote.parser.types import Language
from spendnote.normalizer import NormalizerError, normalize_text

logger = logging.getLogger(__name__)

_EMPTY_INPUT_MESSAGES = {
    Language.EN: "Please enter a transaction.",
    Language.VI: "Vui lòng nhập giao dịch.",
}


@dataclass
class ProcessResult:
    """Outcome of process_input()."""

    status: str                                   # "ok" / "error"
    transaction: Optional[ParsedTransaction] = None
    source: Optional[str] = None                  # "local" / "llm"
    error_message: Optional[str] = None
    error_reason: Optional[str] = None

    def to_dict(self) -> dict:
        if self.status == "ok":
            return {
                "status": self.status,
                "source": self.source,
                "transaction": self.transaction.to_dict(),
            }
        return {
            "status": self.status,
            "error": {
                "message": self.error_message,
                "reason": self.error_reason,
            },
        }


_INVALID_ENTRY_DATE_MESSAGES = {
    Language.EN: "Entry date must be YYYY-MM-DD.",
    Language.VI: "Ngày giao dịch phải có dạng YYYY-MM-DD.",
}


def _coerce_entry_date(entry_date) -> Optional[date]:
    """date / datetime / ISO string -> date. Raises ValueError on bad input."""
    if not entry_date:
        return None
    if isinstance(entry_date, datetime):
        return entry_date.date()
    if isinstance(entry_date, date):
        return entry_date
    return date.fromisoformat(str(entry_date).strip())


def _with_entry_date(tx: ParsedTransaction, entry_date: Optional[date]) -> ParsedTransaction:
    """Override the parsed date with the date chosen by the user."""
    if entry_date is None:
        return tx
    return replace(tx, date=entry_date.isoformat())


def process_input(
    raw: str,
    input_mode="text",
    language=None,
    fallback_currency=None,
    preferred_type=None,
    *,
    skip_gpt: bool = False,
    entry_date=None,
    context_date: Optional[datetime] = None,
) -> ProcessResult:
    """
    Local-first processing.

    Args:
        raw: user input
        input_mode: provenance tag
        language: defaults to DEFAULT_LANGUAGE
        fallback_currency: defaults to DEFAULT_CURRENCY
        preferred_type: caller-chosen type
        skip_gpt: never call the remote normalizer
        entry_date: date picked by the user; overrides the parsed date
        context_date: reference time for relative dates

    Returns:
        ProcessResult

    Flow:
    0. Reject empty input and a malformed entry_date
    1. Parser: parse(raw) -> ParsedTransaction
    2. On ParserError, normalize_text(raw) when GPT is enabled
    """
    lang = Language.from_string(language or config.DEFAULT_LANGUAGE)
    currency = fallback_currency or config.DEFAULT_CURRENCY
    text = (raw or "").strip()

    if not text:
        return ProcessResult(
            status="error",
            error_message=_EMPTY_INPUT_MESSAGES[lang],
            error_reason="empty_input",
        )

    try:
        entry_date = _coerce_entry_date(entry_date)
    except ValueError:
        logger.warning(f"Invalid entry date: {entry_date!r}")
        return ProcessResult(
            status="error",
            error_message=_INVALID_ENTRY_DATE_MESSAGES[lang],
            error_reason="invalid_entry_date",
        )

    try:
        tx = parse(text, input_mode, lang, currency, preferred_type, context_date=context_date)
        logger.info(f"Local parser handled input ({tx.amount} {tx.currency.value})")
        return ProcessResult(status="ok", transaction=_with_entry_date(tx, entry_date), source="local")
    except ParserError as e:
        parser_error = e
        logger.warning(f"Parser error: {e.message}")

    if skip_gpt or not config.LLM_ENABLED:
        return ProcessResult(
            status="error",
            error_message=parser_error.message,
            error_reason=parser_error.code.value,
        )

    try:
        tx = normalize_text(text, input_mode, lang, currency, preferred_type, context_date=context_date)
    except NormalizerError as e:
        logger.error(f"Remote normalizer failed: {e}")
        return ProcessResult(
            status="error",
            error_message=str(e),
            error_reason="normalizer_failed",
        )

    return ProcessResult(status="ok", transaction=_with_entry_date(tx, entry_date), source="llm")
