# -*- coding: utf-8 -*-
"""
GPT Client for the remote normalizer

Wraps the OpenAI call used when local parsing fails, with
NORMALIZER_RESPONSE_SCHEMA as the structured output format.
"""

import json
import logging
from typing import Any, Optional

from openai import OpenAI

from spendnote import config
from spendnote.normalizer.errors import NormalizerError
from spendnote.parser.types import Currency, Language, TransactionType
from spendnote.schemas import NORMALIZER_RESPONSE_SCHEMA

logger = logging.getLogger(__name__)

_INSTRUCTIONS = {
    Language.VI: " ".join([
        "Chuẩn hóa dữ liệu chi tiêu thành JSON.",
        "Hiểu tiếng lóng như: k=nghìn, tr/củ/chai=triệu, xị=100k.",
        "Nếu thiếu thông tin, suy luận hợp lý.",
        "Trả về JSON duy nhất với keys: type, amount, currency, category, merchant, date, note, rawInput.",
        "Date phải là YYYY-MM-DD.",
        "currency chỉ được là USD hoặc VND.",
        "type chỉ được là income hoặc expense.",
    ]),
    Language.EN: " ".join([
        "Normalize personal finance input into JSON.",
        "Understand slang/shorthand such as k=thousand, tr/mil=million.",
        "Infer missing fields reasonably.",
        "Return only JSON with keys: type, amount, currency, category, merchant, date, note, rawInput.",
        "Date must be YYYY-MM-DD.",
        "currency must be USD or VND.",
        "type must be income or expense.",
    ]),
}

_SYSTEM_PROMPT = "You are a bookkeeping assistant for English and Vietnamese expense notes."


def build_normalizer_prompt(
    raw: str,
    language: Language,
    fallback_currency: Currency,
    preferred_type: Optional[TransactionType] = None,
) -> str:
    """Instruction plus a one-line context header and the raw input."""
    preferred = preferred_type.value if preferred_type else "none"
    return (
        f"{_INSTRUCTIONS[language]}\n"
        f"language={language.value}; defaultCurrency={fallback_currency.value}; "
        f"preferredType={preferred}; input={raw}"
    )


def _clean_json(text: str) -> str:
    """Strip markdown code fences some models wrap around JSON."""
    return text.replace("```json", "").replace("```JSON", "").replace("```", "").strip()


def call_gpt_normalizer(
    raw: str,
    language=Language.EN,
    fallback_currency=Currency.VND,
    preferred_type: Optional[TransactionType] = None,
    *,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> dict[str, Any]:
    """
    Ask GPT to normalize ``raw`` into a transaction-shaped dict.

    Args:
        raw: user input that local parsing could not handle
        language: instruction language
        fallback_currency: currency to assume when the text has none
        preferred_type: caller-chosen type, passed as context
        api_key: OpenAI API key (defaults to OPENAI_API_KEY)
        model: model name (defaults to GPT_MODEL)

    Returns:
        Decoded JSON object (not yet validated)

    Raises:
        NormalizerError: key missing, request failed or answer not JSON
    """
    key = api_key or config.OPENAI_API_KEY
    if not key:
        raise NormalizerError("OPENAI_API_KEY is not set")

    lang = Language.from_string(language)
    currency = Currency.from_string(fallback_currency)
    tx_type = TransactionType.from_string(preferred_type) if preferred_type else None

    model_name = model or config.GPT_MODEL
    client = OpenAI(api_key=key, timeout=config.GPT_TIMEOUT)
    prompt = build_normalizer_prompt(raw, lang, currency, tx_type)

    try:
        completion = client.chat.completions.create(
            model=model_name,
            messages=[
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            response_format={
                "type": "json_schema",
                "json_schema": NORMALIZER_RESPONSE_SCHEMA,
            },
        )
    except Exception as e:
        logger.error(f"GPT normalizer request failed: {e}")
        raise NormalizerError(f"GPT request failed: {e}") from e

    response_text = completion.choices[0].message.content or ""
    try:
        result = json.loads(_clean_json(response_text))
    except json.JSONDecodeError as e:
        logger.error(f"GPT normalizer returned invalid JSON: {response_text!r}")
        raise NormalizerError("GPT output is not valid JSON") from e

    if not isinstance(result, dict):
        raise NormalizerError("GPT output is not a JSON object")

    logger.debug(f"GPT normalizer response: {result}")
    return result
