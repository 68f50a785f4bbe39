# -*- coding: utf-8 -*-
"""
Enums shared by the parser, the remote normalizer and the CLI.
"""

from enum import Enum


class _StringEnum(Enum):
    @classmethod
    def from_string(cls, value):
        """Accept an enum member or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown {cls.__name__}: {value}")


class TransactionType(_StringEnum):
    """Transaction direction."""

    INCOME = "income"
    EXPENSE = "expense"


class Language(_StringEnum):
    """Display language for labels and error messages."""

    EN = "en"
    VI = "vi"


class InputMode(_StringEnum):
    """Where the raw text came from. Supplied by the caller, never inferred."""

    MANUAL = "manual"
    TEXT = "text"
    VOICE = "voice"
    IMAGE = "image"


class Currency(Enum):
    """Supported currencies."""

    USD = "USD"
    VND = "VND"

    @classmethod
    def from_string(cls, value) -> "Currency":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown currency: {value}")


def input_mode_tag(input_mode) -> str:
    """InputMode or free-form caller tag -> the string stored on a transaction."""
    if isinstance(input_mode, InputMode):
        return input_mode.value
    return str(input_mode)
