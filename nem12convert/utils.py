# nem12convert/utils.py
from __future__ import annotations
import re
import datetime as dt
from typing import Iterable, Optional

import numpy as np
import pandas as pd

from . import canon

_LINE_BREAK = re.compile(r"\r?\n")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def decode(content: bytes | str) -> str:
    if isinstance(content, str):
        return content
    return content.decode("utf-8", errors="replace")


def split_lines(content: bytes | str, *, drop_blank: bool = False) -> list[str]:
    """Split file content on LF or CRLF, optionally dropping whitespace-only lines."""
    lines = _LINE_BREAK.split(decode(content))
    if drop_blank:
        return [line for line in lines if line.strip()]
    return lines


def to_float(value: str) -> Optional[float]:
    """Parse a single numeric cell; None when it is blank, non-numeric or not finite."""
    s = value.strip()
    if not _NUMBER.match(s):
        return None
    num = float(s)
    return num if np.isfinite(num) else None


def to_floats(values: Iterable[str]) -> list[float]:
    """Coerce raw CSV cells to readings; anything unparseable becomes 0.0."""
    out: list[float] = []
    for v in values:
        num = to_float(v)
        out.append(0.0 if num is None else num)
    return out


def parse_iso_date(value: str) -> Optional[dt.date]:
    """YYYY-MM-DD to a date, or None if the text is not a valid calendar day."""
    s = value.strip()
    if not _ISO_DATE.match(s):
        return None
    try:
        return dt.date.fromisoformat(s)
    except ValueError:
        return None


def parse_timestamp(value: str) -> Optional[pd.Timestamp]:
    ts = pd.to_datetime(value.strip(), errors="coerce")
    if pd.isna(ts):
        return None
    return ts


def minutes_between(start: pd.Timestamp, end: pd.Timestamp) -> float:
    return (end - start) / pd.Timedelta(minutes=1)


def round_half_up(x: float) -> int:
    """Round to the nearest integer with .5 going up (np.rint rounds half to even)."""
    return int(np.floor(x + 0.5))


def expected_interval_count(interval_length: int) -> int:
    return round_half_up(canon.MINUTES_PER_DAY / interval_length)


def compact_date(day: dt.date) -> str:
    return day.strftime("%Y%m%d")


def compact_datetime(ts: dt.datetime) -> str:
    """
    UTC ISO instant with '-' and ':' stripped, cut to 15 characters
    (e.g. 2023-01-01T00:00:00Z -> 20230101T000000).
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=dt.timezone.utc)
    iso = ts.astimezone(dt.timezone.utc).isoformat()
    return iso.replace("-", "").replace(":", "")[:15]


def utc_midnight(day: dt.date) -> dt.datetime:
    return dt.datetime(day.year, day.month, day.day, tzinfo=dt.timezone.utc)
