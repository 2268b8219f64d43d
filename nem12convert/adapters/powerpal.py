"""Long-format exports with a single timestamp per reading (Powerpal style).

Readings are in watt-hours; the bucket width is implied by the gap between
timestamps.

    datetime_utc,datetime_local,watt_hours,cost_dollars,is_peak
    2024-07-27 00:00:00,2024-07-27 10:00:00,12.5,0.0008190972,false
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .. import canon, utils
from ..types import CanonicalRow, RegisterType

_TIMESTAMP = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
WH_PER_KWH = 1000.0


def _looks_numeric(value: str) -> bool:
    # blank counts as numeric (zero), as in a plain Number() conversion
    return not value.strip() or utils.to_float(value) is not None


@dataclass(frozen=True)
class PowerpalAdapter:
    name: str = "powerpal"
    nmi: str = canon.PLACEHOLDER_NMI
    meter_serial: str = canon.PLACEHOLDER_SERIAL

    def is_valid(self, content: bytes) -> bool:
        lines = utils.split_lines(content)
        if len(lines) < 2:
            return False
        if not lines[0].strip().startswith(canon.POWERPAL_HEADER):
            return False
        for line in lines[1:]:
            cols = line.split(",")
            if len(cols) == 5 and _TIMESTAMP.match(cols[0]) and _looks_numeric(cols[2]):
                return True
        return False

    def _data_lines(self, content: bytes) -> list[str]:
        lines = utils.split_lines(content, drop_blank=True)
        if len(lines) < 2 or not lines[0].strip().startswith(canon.POWERPAL_HEADER):
            return []
        return lines[1:]

    def get_interval_length(self, content: bytes) -> int:
        """
        Minutes between the first timestamp and the first later one.

        Returns 0 instead of raising when no positive gap exists; the caller
        decides what a zero means.
        """
        first: Optional[pd.Timestamp] = None
        for line in self._data_lines(content):
            cols = line.split(",")
            if len(cols) != 5:
                continue
            ts = utils.parse_timestamp(cols[0])
            if ts is None:
                continue
            if first is None:
                first = ts
                continue
            try:
                diff = utils.minutes_between(first, ts)
            except TypeError:  # tz-aware vs naive
                continue
            if diff > 0:
                return utils.round_half_up(diff)
        return 0

    def parse_rows(self, content: bytes) -> list[CanonicalRow]:
        days: dict = {}
        for line in self._data_lines(content):
            cols = line.split(",")
            if len(cols) != 5:
                continue
            day = utils.parse_iso_date(cols[0][:10])
            watt_hours = utils.to_float(cols[2])
            if day is None or watt_hours is None:
                continue
            days.setdefault(day, []).append(watt_hours / WH_PER_KWH)

        return [
            CanonicalRow(
                date=day,
                interval_values=values,
                register_type=RegisterType.E1,
                nmi=self.nmi,
                meter_serial=self.meter_serial,
                estimated=False,
            )
            for day, values in days.items()
        ]
