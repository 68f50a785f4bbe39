# -*- coding: utf-8 -*-
"""
Parser Error Types

Error codes and per-language message templates.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from spendnote.parser.types import Language


class ParserErrorCode(Enum):
    """Parser error codes"""

    NO_AMOUNT_FOUND = "no_amount_found"


ERROR_MESSAGES = {
    ParserErrorCode.NO_AMOUNT_FOUND: {
        Language.EN: "Could not find a valid amount.",
        Language.VI: "Không tìm thấy số tiền hợp lệ.",
    },
}

_FALLBACK_MESSAGES = {
    Language.EN: "Could not parse the input.",
    Language.VI: "Không thể phân tích nội dung.",
}


@dataclass
class ParserError(Exception):
    """Raised when local extraction cannot produce a transaction."""

    code: ParserErrorCode
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_code(cls, code: ParserErrorCode, language=Language.EN, **kwargs) -> "ParserError":
        """Build an error with the message template for ``language``."""
        lang = Language.from_string(language)
        templates = ERROR_MESSAGES.get(code, _FALLBACK_MESSAGES)
        template = templates.get(lang, _FALLBACK_MESSAGES[lang])
        message = template.format(**kwargs) if kwargs else template
        return cls(code=code, message=message, details=kwargs if kwargs else None)
