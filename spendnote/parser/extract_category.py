# -*- coding: utf-8 -*-
"""
Category Classification

The ordered rule table in rules/lexicons.yaml is evaluated top to bottom and
the first rule that matches and applies to the transaction type wins.
"""

import logging

from spendnote.parser.lexicons import category_rules, default_categories
from spendnote.parser.types import Language, TransactionType

logger = logging.getLogger(__name__)


def classify_category(text: str, language=Language.EN, tx_type=TransactionType.EXPENSE) -> str:
    """
    Map an entry to a category label in the display language.

    Args:
        text: raw input
        language: label language
        tx_type: resolved transaction type; expense-only rules never label income

    Returns:
        Category label, or the type's "Other" label when no rule matches.
    """
    lang = Language.from_string(language).value
    kind = TransactionType.from_string(tx_type).value
    text = text or ""

    for rule in category_rules():
        if not rule.applies_to(kind):
            continue
        if rule.pattern.search(text):
            logger.debug(f"Category rule '{rule.key}' matched")
            return rule.label(lang)

    return default_categories()[kind][lang]
