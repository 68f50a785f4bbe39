# -*- coding: utf-8 -*-
"""
Income / Expense Classification

Caller context wins; otherwise keyword lexicons decide, expense by default.
"""

from typing import Optional

from spendnote.parser.lexicons import expense_keywords, income_keywords, income_word_pattern
from spendnote.parser.types import TransactionType


def classify_type(text: str, preferred: Optional[TransactionType] = None) -> TransactionType:
    """
    Classify an entry as income or expense.

    Args:
        text: raw input
        preferred: type chosen by the caller (e.g. a UI toggle); returned as-is

    Returns:
        TransactionType
    """
    if preferred:
        return TransactionType.from_string(preferred)

    lower = (text or "").lower()
    if any(keyword in lower for keyword in income_keywords()):
        return TransactionType.INCOME
    words = income_word_pattern()
    if words and words.search(lower):
        return TransactionType.INCOME
    if any(keyword in lower for keyword in expense_keywords()):
        return TransactionType.EXPENSE
    return TransactionType.EXPENSE
