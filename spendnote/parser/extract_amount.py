# -*- coding: utf-8 -*-
"""
Amount Extraction

Finds the price in a free-text entry.
Supported shapes:
- bare numbers: cafe 45, lunch 12.5, lunch 12,5
- grouped thousands: rent 8.000.000, rent 8,000,000, 1,234.56
- shorthand units: 45k, 2 xị, 20tr, 3 củ, 1 chai, 5m, 5mil
- currency suffixes: 8 usd, 50000 vnd, 50.000đ, 12$
- both: 45kđ, 50k vnd, 2tr đồng

Date-shaped substrings are scrubbed first so that day, month and year digits
never become candidates.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from spendnote.parser.lexicons import small_amount_cue_pattern
from spendnote.parser.types import Currency

logger = logging.getLogger(__name__)

# Date formats removed before scanning
_DATE_SCRUB_PATTERNS = (
    re.compile(r"\b\d{4}-\d{2}-\d{2}\b"),              # 2026-01-15
    re.compile(r"\b\d{1,2}/\d{1,2}(?:/\d{2,4})?\b"),   # 15/1, 15/1/26, 15/1/2026
    re.compile(r"\b(?:ngày|day)\s+\d{1,2}\b"),         # ngày 15, day 3
)

_UNIT_MULTIPLIERS = {
    "k": 1_000,
    "xị": 1_000,
    "tr": 1_000_000,
    "củ": 1_000_000,
    "cu": 1_000_000,
    "chai": 1_000_000,
    "m": 1_000_000,
    "mil": 1_000_000,
}
_CURRENCY_SUFFIXES = ("vnd", "đồng", "đ", "usd", "$")
_VND_SUFFIXES = ("vnd", "đồng", "đ")


def _alternation(units) -> str:
    # Longest first so "mil" is not read as "m" + "il".
    return "|".join(re.escape(u) for u in sorted(units, key=len, reverse=True))


_NUMBER = (
    r"\d{1,3}(?:[.,]\d{3})+(?:[.,]\d+)?(?!\d)"  # 8.000.000 / 1,234.56
    r"|\d+(?:[.,]\d+)?"                         # 45 / 12.5 / 12,5
)
# A multiplier may carry a VND suffix (45kđ, 50k vnd). Either way the unit
# only counts when no letter follows it: "5 mua" is not 5 million.
_TOKEN_PATTERN = re.compile(
    rf"({_NUMBER})\s*"
    rf"(?:(?:({_alternation(_UNIT_MULTIPLIERS)})(?:\s*(?:{_alternation(_VND_SUFFIXES)}))?"
    rf"|({_alternation(_CURRENCY_SUFFIXES)}))(?![^\W\d_]))?"
)
_GROUPED_PATTERN = re.compile(r"(\d{1,3}(?:[.,]\d{3})+)(?:[.,](\d+))?")


@dataclass(frozen=True)
class Candidate:
    """A numeric token found in the text."""

    value: float
    has_unit: bool
    unit: Optional[str] = None


def scrub_dates(text: str) -> str:
    """Blank out date-shaped substrings (expects lower-cased text)."""
    scrubbed = text
    for pattern in _DATE_SCRUB_PATTERNS:
        scrubbed = pattern.sub(" ", scrubbed)
    return scrubbed


def parse_number_token(token: str) -> Optional[Decimal]:
    """
    Parse one numeric token.

    Repeating three-digit groups are thousands grouping whichever separator is
    used; a trailing group of another length is the decimal part.
    """
    compact = re.sub(r"\s", "", token or "")
    if not compact:
        return None

    grouped = _GROUPED_PATTERN.fullmatch(compact)
    if grouped:
        integer_part = re.sub(r"[.,]", "", grouped.group(1))
        fraction = grouped.group(2)
        normalized = f"{integer_part}.{fraction}" if fraction else integer_part
    else:
        normalized = compact.replace(",", ".", 1)

    try:
        return Decimal(normalized)
    except InvalidOperation:
        return None


def find_candidates(text: str) -> List[Candidate]:
    """Scan scrubbed text and return every non-zero numeric candidate."""
    scrubbed = scrub_dates((text or "").lower())

    candidates: List[Candidate] = []
    for match in _TOKEN_PATTERN.finditer(scrubbed):
        number = parse_number_token(match.group(1))
        if not number:
            continue
        unit = match.group(2) or match.group(3)
        multiplier = _UNIT_MULTIPLIERS.get(unit, 1) if unit else 1
        value = float(number * multiplier)
        if not math.isfinite(value):
            logger.debug(f"Skipping out-of-range number {match.group(1)[:20]}...")
            continue
        candidates.append(Candidate(value=value, has_unit=bool(unit), unit=unit))
    return candidates


def extract_amount(text: str, currency=Currency.VND) -> Optional[float]:
    """
    Pick the most plausible amount in ``text``.

    Args:
        text: raw input
        currency: currency already detected for the text

    Returns:
        The amount, or None when the text holds no numeric token.
    """
    candidates = find_candidates(text)
    if not candidates:
        return None

    # Marked tokens beat bare numbers; the maximum skips item counts.
    marked = [c for c in candidates if c.has_unit]
    pool = marked or candidates
    value = max(c.value for c in pool)

    lower = (text or "").lower()
    if (
        Currency.from_string(currency) is Currency.VND
        and value < 1_000
        and small_amount_cue_pattern().search(lower)
    ):
        logger.debug(f"Scaling shorthand VND amount {value} by 1000")
        value *= 1_000

    logger.debug(f"Amount candidates={candidates} selected={value}")
    return value
