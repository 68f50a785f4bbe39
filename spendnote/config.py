"""
Environment configuration module
Loads and validates settings from the environment.
"""

import os
from dotenv import load_dotenv

# Load .env file (for local development)
load_dotenv()

# Parser defaults
DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'vi').strip().lower()
DEFAULT_CURRENCY = os.getenv('DEFAULT_CURRENCY', 'VND').strip().upper()
APP_TIMEZONE = os.getenv('APP_TIMEZONE', 'Asia/Ho_Chi_Minh')

# Remote normalizer (optional; local parsing works without it)
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY', '')
GPT_MODEL = os.getenv('GPT_MODEL', 'gpt-4o-mini')
GPT_TIMEOUT = float(os.getenv('GPT_TIMEOUT', '30'))
LLM_ENABLED = bool(OPENAI_API_KEY)

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

# Validate enumerated settings
allowed_values = {
    'DEFAULT_LANGUAGE': (DEFAULT_LANGUAGE, ('en', 'vi')),
    'DEFAULT_CURRENCY': (DEFAULT_CURRENCY, ('USD', 'VND')),
}

invalid_vars = [
    f"{name}={value!r} (expected one of {', '.join(choices)})"
    for name, (value, choices) in allowed_values.items()
    if value not in choices
]

if invalid_vars:
    raise ValueError(f"Invalid environment variables: {'; '.join(invalid_vars)}")
