"""Long-format exports with explicit from/to timestamps (Origin style).

    Usage Type,Amount Used,From (date/time),To (date/time)
    Consumption,1.23,2023-01-01T00:00:00,2023-01-01T00:30:00
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .. import canon, exceptions, utils
from ..types import CanonicalRow, RegisterType

_TIME_PART = re.compile(r"T\d{2}:\d{2}:\d{2}")

REGISTER_LABELS: dict[str, RegisterType] = {
    "Consumption": RegisterType.E1,
}


@dataclass(frozen=True)
class OriginAdapter:
    name: str = "origin"
    nmi: str = canon.PLACEHOLDER_NMI
    meter_serial: str = canon.PLACEHOLDER_SERIAL

    def is_valid(self, content: bytes) -> bool:
        lines = utils.split_lines(content)
        if len(lines) < 2:
            return False
        if not lines[0].strip().startswith(canon.ORIGIN_HEADER):
            return False
        for line in lines[1:]:
            cols = line.split(",")
            if (
                len(cols) == 4
                and cols[0] == "Consumption"
                and _TIME_PART.search(cols[2])
                and _TIME_PART.search(cols[3])
            ):
                return True
        return False

    def get_interval_length(self, content: bytes) -> int:
        """Duration of the first row whose To is strictly after its From."""
        for line in utils.split_lines(content, drop_blank=True)[1:]:
            cols = line.split(",")
            if len(cols) != 4:
                continue
            start = utils.parse_timestamp(cols[2])
            end = utils.parse_timestamp(cols[3])
            if start is None or end is None:
                continue
            try:
                diff = utils.minutes_between(start, end)
            except TypeError:  # tz-aware vs naive
                continue
            if diff > 0:
                return utils.round_half_up(diff)
        raise exceptions.IntervalLengthError(
            "Unable to determine interval length from file content"
        )

    def parse_rows(self, content: bytes) -> list[CanonicalRow]:
        """
        One canonical row per day. Readings are appended in file order, so
        the file is expected to be sorted by time already.
        """
        days: dict = {}
        for line in utils.split_lines(content, drop_blank=True)[1:]:
            cols = line.split(",")
            if len(cols) != 4:
                continue
            register = REGISTER_LABELS.get(cols[0].strip())
            day = utils.parse_iso_date(cols[2][:10])
            amount = utils.to_float(cols[1])
            if register is None or day is None or amount is None:
                continue
            days.setdefault(day, []).append(amount)

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
