# -*- coding: utf-8 -*-
"""
Remote normalizer.

Fallback used only after local parsing has failed: GPT turns the raw text into
the same ParsedTransaction shape the local parser produces.
"""

import logging
from datetime import datetime
from typing import Optional

from spendnote.parser import ParsedTransaction
from spendnote.parser.types import TransactionType, input_mode_tag
from .errors import NormalizerError
from .gpt_client import call_gpt_normalizer
from .validator import to_parsed_transaction

logger = logging.getLogger(__name__)


def normalize_text(
    raw: str,
    input_mode="text",
    language="en",
    fallback_currency="VND",
    preferred_type: Optional[TransactionType] = None,
    *,
    context_date: Optional[datetime] = None,
) -> ParsedTransaction:
    """
    Normalize ``raw`` with GPT.

    Raises:
        NormalizerError: request failed or the answer was unusable
    """
    payload = call_gpt_normalizer(raw, language, fallback_currency, preferred_type)
    tx = to_parsed_transaction(payload, raw, input_mode_tag(input_mode), language, context_date=context_date)
    logger.info(f"Remote normalizer produced {tx.amount} {tx.currency.value}")
    return tx


__all__ = [
    "normalize_text",
    "call_gpt_normalizer",
    "to_parsed_transaction",
    "NormalizerError",
]
