# -*- coding: utf-8 -*-
"""
Currency Detection

USD or VND from lexical cues; the caller's fallback when nothing matches.
"""

import re

from spendnote.parser.types import Currency

_USD_PATTERN = re.compile(r"(\$|usd|dollar)")
# "45k", "2tr": shorthand units only ever mean VND.
_VND_PATTERN = re.compile(r"(vnd|đ|₫|k\b|tr\b|triệu|nghìn|ngan)")


def detect_currency(text: str, fallback=Currency.VND) -> Currency:
    """
    Detect the currency of a free-text entry.

    Args:
        text: raw input
        fallback: currency used when no cue matches

    Returns:
        Currency (first match wins: USD cues, then VND cues, then fallback)
    """
    lower = (text or "").lower()
    if _USD_PATTERN.search(lower):
        return Currency.USD
    if _VND_PATTERN.search(lower):
        return Currency.VND
    return Currency.from_string(fallback)
