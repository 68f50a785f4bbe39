# -*- coding: utf-8 -*-
"""
Keyword lexicons and category rules.

Loaded once from spendnote/rules/lexicons.yaml and cached for the life of the
process; every accessor returns immutable data.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_LEXICON_PATH = Path(__file__).resolve().parents[1] / "rules" / "lexicons.yaml"


@dataclass(frozen=True)
class CategoryRule:
    """One row of the ordered category table."""

    key: str
    pattern: re.Pattern[str]
    labels: dict
    types: frozenset

    def label(self, language: str) -> str:
        return self.labels[language]

    def applies_to(self, tx_type: str) -> bool:
        return tx_type in self.types


@lru_cache(maxsize=1)
def _load_config_from_yaml() -> dict:
    """Load the full lexicon file."""
    with open(_LEXICON_PATH, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    logger.debug(f"Loaded lexicons from {_LEXICON_PATH}")
    return data


def _keywords(section: str) -> tuple[str, ...]:
    values = _load_config_from_yaml().get(section) or []
    return tuple(str(v).lower() for v in values)


@lru_cache(maxsize=1)
def income_keywords() -> tuple[str, ...]:
    return _keywords("income_keywords")


@lru_cache(maxsize=1)
def income_word_pattern() -> re.Pattern[str] | None:
    """Whole-word income cues ("thu 5tr" but not "thuốc 50k")."""
    words = _keywords("income_words")
    if not words:
        return None
    return re.compile(r"\b(?:" + "|".join(re.escape(w) for w in words) + r")\b")


@lru_cache(maxsize=1)
def expense_keywords() -> tuple[str, ...]:
    return _keywords("expense_keywords")


@lru_cache(maxsize=1)
def small_amount_cue_pattern() -> re.Pattern[str]:
    """Cues that mark a sub-1000 VND figure as shorthand for thousands."""
    raw = _load_config_from_yaml().get("small_amount_cues") or ""
    return re.compile(f"({raw})")


@lru_cache(maxsize=1)
def category_rules() -> tuple[CategoryRule, ...]:
    rules = []
    for row in _load_config_from_yaml().get("category_rules") or []:
        rules.append(
            CategoryRule(
                key=row["key"],
                pattern=re.compile(row["pattern"], re.IGNORECASE),
                labels={"en": row["en"], "vi": row["vi"]},
                types=frozenset(row.get("types") or ("income", "expense")),
            )
        )
    return tuple(rules)


@lru_cache(maxsize=1)
def default_categories() -> dict:
    """{"income": {"en": ..., "vi": ...}, "expense": {...}}"""
    return _load_config_from_yaml().get("default_categories") or {}
