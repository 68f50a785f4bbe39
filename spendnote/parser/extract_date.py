# -*- coding: utf-8 -*-
"""
Date Normalization

Resolves the transaction date, checked in this order:
- relative words: yesterday / hôm qua / hom qua, today / hôm nay / hom nay
- ISO date: YYYY-MM-DD (e.g., 2026-01-15)
- day-first date: D/M, D/M/YY, D/M/YYYY (e.g., 15/1, 15/1/26)
- nothing matched: today
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from spendnote import config

_YESTERDAY_PATTERN = re.compile(r"(yesterday|hôm qua|hom qua)")
_TODAY_PATTERN = re.compile(r"(today|hôm nay|hom nay)")
_ISO_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})")
_DAY_MONTH_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})(?:/(\d{2,4}))?")


def current_datetime() -> datetime:
    """Wall-clock now in the application time zone, read on every call."""
    return datetime.now(ZoneInfo(config.APP_TIMEZONE))


def normalize_date(text: str, now: Optional[datetime] = None) -> str:
    """
    Resolve the date of an entry as "YYYY-MM-DD".

    Args:
        text: raw input
        now: reference time; defaults to the current time

    Returns:
        ISO date string, never None
    """
    now = now or current_datetime()
    today = now.date()
    text = text or ""
    lower = text.lower()

    if _YESTERDAY_PATTERN.search(lower):
        return (today - timedelta(days=1)).isoformat()
    if _TODAY_PATTERN.search(lower):
        return today.isoformat()

    iso_date = _extract_iso_date(text)
    if iso_date:
        return iso_date

    day_month = _extract_day_month_date(text, today)
    if day_month:
        return day_month

    return today.isoformat()


def _extract_iso_date(text: str) -> Optional[str]:
    """YYYY-MM-DD, kept as written when it is a real calendar date."""
    match = _ISO_DATE_PATTERN.search(text)
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    return _safe_date(year, month, day)


def _extract_day_month_date(text: str, today: date) -> Optional[str]:
    """D/M[/Y]: two-digit years are 20YY, a missing year is this year."""
    match = _DAY_MONTH_PATTERN.search(text)
    if not match:
        return None

    day = int(match.group(1))
    month = int(match.group(2))
    year_text = match.group(3)
    if not year_text:
        year = today.year
    elif len(year_text) == 2:
        year = 2000 + int(year_text)
    else:
        year = int(year_text)

    return _safe_date(year, month, day)


def _safe_date(year: int, month: int, day: int) -> Optional[str]:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None
