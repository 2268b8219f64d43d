from __future__ import annotations
import datetime as dt
import math
from decimal import Decimal
from typing import Optional

from . import canon, utils
from .types import Nem12File, Record100, Record200, Record300, Record400


def format_number(value: Optional[float]) -> str:
    """
    Render a reading the way a plain number-to-string conversion would:
    shortest round-trip digits, positional for 1e-6 <= |v| < 1e21 and
    exponent form (1e+21, 1e-7) outside that range. None is an empty field.
    """
    if value is None:
        return ""
    v = float(value)
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    if v == 0:
        return "0"
    d = Decimal(repr(v)).normalize()
    if 1e-6 <= abs(v) < 1e21:
        return format(d, "f")

    sign, digits, exp = d.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(map(str, digits[1:]))
    e = exp + len(digits) - 1
    return f"{'-' if sign else ''}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def _opt_datetime(ts: Optional[dt.datetime]) -> str:
    return utils.compact_datetime(ts) if ts is not None else ""


def _opt(value: object) -> str:
    return "" if value is None else str(value)


def record_100(h: Record100) -> str:
    return ",".join(
        [
            h.record_indicator,
            h.version_header,
            utils.compact_datetime(h.date_time),
            h.from_participant,
            h.to_participant,
        ]
    )


def record_200(n: Record200) -> str:
    return ",".join(
        [
            n.record_indicator,
            n.nmi,
            n.nmi_configuration,
            n.register_id,
            n.nmi_suffix,
            _opt(n.mdm_data_stream_identifier),
            _opt(n.meter_serial_number),
            n.uom,
            str(n.interval_length),
            _opt_datetime(n.next_scheduled_read_date),
        ]
    )


def record_300(b: Record300) -> str:
    fields = [
        b.record_indicator,
        b.interval_date,
        *(format_number(v) for v in b.interval_values),
        # each quality method character takes its own field
        *b.quality_method,
        _opt(b.reason_code),
        _opt(b.reason_description),
        _opt_datetime(b.update_date_time),
        _opt_datetime(b.msats_load_date_time),
    ]
    kept = [
        f for i, f in enumerate(fields) if i < canon.RECORD_300_FIELD_BUDGET or f
    ]
    return ",".join(kept)


def record_400(e: Record400) -> str:
    return ",".join(
        [
            e.record_indicator,
            str(e.start_interval),
            str(e.end_interval),
            e.quality_method,
            _opt(e.reason_code),
            _opt(e.reason_description),
        ]
    )


def serialize_nem12(file: Nem12File) -> str:
    """Render a NEM12 document as newline-joined 100/200/300/400/900 records."""
    lines = [record_100(file.header)]
    for block in file.nmis:
        lines.append(record_200(block.nmi_header))
        lines.extend(record_300(b) for b in block.interval_blocks)
        if block.event_records:
            lines.extend(record_400(e) for e in block.event_records)
    lines.append(file.trailer.record_indicator)
    return "\n".join(lines)
