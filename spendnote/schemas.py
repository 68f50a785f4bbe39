"""
JSON Schema definitions for Structured Output

Used with OpenAI Structured Output so the remote normalizer answers in the
same shape as ParsedTransaction.to_dict().
"""

NORMALIZER_RESPONSE_SCHEMA = {
    "name": "normalized_transaction",
    "strict": False,
    "schema": {
        "type": "object",
        "properties": {
            "type": {
                "type": "string",
                "enum": ["income", "expense"],
                "description": "Transaction direction"
            },
            "amount": {
                "type": "number",
                "description": "Positive amount in the currency's major unit (45000 VND, 12.5 USD)"
            },
            "currency": {
                "type": "string",
                "enum": ["USD", "VND"],
                "description": "Currency code"
            },
            "category": {
                "type": "string",
                "description": "Category label in the requested language"
            },
            "merchant": {
                "type": ["string", "null"],
                "description": "Merchant or item name, if any"
            },
            "date": {
                "type": "string",
                "description": "Transaction date as YYYY-MM-DD"
            },
            "note": {
                "type": "string",
                "description": "Short note; defaults to the input"
            },
            "rawInput": {
                "type": "string",
                "description": "The original input"
            }
        },
        "required": ["type", "amount", "currency", "category", "date"],
        "additionalProperties": False
    }
}
