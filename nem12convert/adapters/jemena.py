"""Column-per-interval exports (Jemena/AusNet style).

One row per meter register per day, one column per interval named
``HH:MM - HH:MM``:

    NMI,METER SERIAL NUMBER,CON/GEN,DATE,ESTIMATED?,00:00 - 00:30,00:30 - 01:00,...
    6001204490,000000000000321347,Consumption,2023-07-19,No,0.0562,0.0250,...
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

from .. import canon, exceptions, utils
from ..types import CanonicalRow, RegisterType

_INTERVAL_COL = re.compile(r"(\d{2}):(\d{2})\s*-\s*(\d{2}):(\d{2})")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

REGISTER_LABELS: dict[str, RegisterType] = {
    "Consumption": RegisterType.E1,
    "Controlled Load Consumption": RegisterType.E2,
}

# NMI, serial, type, date, estimated
_LEADING_COLS = 5


def _column_minutes(col: str) -> int:
    m = _INTERVAL_COL.search(col)
    if m is None:
        raise exceptions.IntervalLengthError("Malformed interval column")
    start = int(m.group(1)) * 60 + int(m.group(2))
    end = int(m.group(3)) * 60 + int(m.group(4))
    length = end - start
    if length <= 0:  # range crosses midnight
        length += canon.MINUTES_PER_DAY
    return length


def _first_interval_col(header: list[str]) -> Optional[int]:
    return next(
        (i for i, h in enumerate(header) if _INTERVAL_COL.search(h)),
        None,
    )


@dataclass(frozen=True)
class JemenaAdapter:
    name: str = "jemena"

    def is_valid(self, content: bytes) -> bool:
        lines = utils.split_lines(content)
        if len(lines) < 2:
            return False
        if not lines[0].strip().startswith(canon.JEMENA_HEADER):
            return False
        for line in lines[1:]:
            cols = line.split(",")
            if (
                len(cols) > 10
                and cols[2] in REGISTER_LABELS
                and _ISO_DATE.match(cols[3])
            ):
                return True
        return False

    def get_interval_length(self, content: bytes) -> int:
        """
        Interval length from the time-range column headers.

        Every interval column must describe the same length; there is no
        averaging or majority vote.
        """
        lines = utils.split_lines(content, drop_blank=True)
        if not lines:
            raise exceptions.IntervalLengthError("No header found")
        header = [h.strip() for h in lines[0].split(",")]
        start = _first_interval_col(header)
        if start is None:
            raise exceptions.IntervalLengthError("No interval columns found")

        cols = [h for h in header[start:] if h]
        interval_length = _column_minutes(cols[0])
        for col in cols[1:]:
            if _column_minutes(col) != interval_length:
                raise exceptions.IntervalLengthError(
                    "Inconsistent interval lengths detected"
                )
        return interval_length

    def parse_rows(self, content: bytes) -> list[CanonicalRow]:
        lines = utils.split_lines(content, drop_blank=True)
        if len(lines) < 2:
            return []
        header = lines[0].split(",")
        values_from = _first_interval_col(header)
        if values_from is None:
            values_from = _LEADING_COLS

        rows: list[CanonicalRow] = []
        for line in lines[1:]:
            cols = line.split(",")
            if len(cols) < _LEADING_COLS:
                continue
            register = REGISTER_LABELS.get(cols[2])
            day = utils.parse_iso_date(cols[3])
            if register is None or day is None:
                continue
            rows.append(
                CanonicalRow(
                    date=day,
                    interval_values=utils.to_floats(cols[values_from:]),
                    register_type=register,
                    nmi=cols[0],
                    meter_serial=cols[1],
                    estimated=cols[4].strip().lower() == "yes",
                )
            )
        return rows
