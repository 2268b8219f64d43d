from __future__ import annotations
from typing import Final

NEM12_VERSION: Final[str] = "NEM12"
FROM_PARTICIPANT: Final[str] = "SPANMDP"
TO_PARTICIPANT: Final[str] = "SPANMDP"

# Used when the source file carries no meter identity
PLACEHOLDER_NMI: Final[str] = "9999999999"
PLACEHOLDER_SERIAL: Final[str] = "55555555"

UOM: Final[str] = "KWH"
QUALITY_ACTUAL: Final[str] = "A"
MINUTES_PER_DAY: Final[int] = 1440

# 300 record fields at or past this position are only kept when non-empty
RECORD_300_FIELD_BUDGET: Final[int] = 55

# Header signatures of the supported source formats
JEMENA_HEADER: Final[str] = "NMI,METER SERIAL NUMBER,CON/GEN,DATE,ESTIMATED?"
ORIGIN_HEADER: Final[str] = "Usage Type,Amount Used,From (date/time),To (date/time)"
POWERPAL_HEADER: Final[str] = "datetime_utc,datetime_local,watt_hours,cost_dollars,is_peak"
