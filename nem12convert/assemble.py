from __future__ import annotations
import datetime as dt
from typing import Sequence

from . import canon, exceptions, utils
from .types import (
    CanonicalRow,
    Nem12File,
    NmiBlock,
    Record100,
    Record200,
    Record300,
    RegisterType,
)


def expected_interval_count(interval_length: int) -> int:
    """Number of 300 record values per day: 1440 / interval_length, rounded."""
    exceptions.require(
        interval_length > 0,
        f"Interval length must be positive, got {interval_length}",
        exceptions.IntervalLengthError,
    )
    return utils.expected_interval_count(interval_length)


def generate_header_and_meter_blocks(
    rows: Sequence[CanonicalRow], interval_length: int
) -> tuple[Record100, list[Record200]]:
    """
    Build the 100 header and one 200 header per register present.

    The header date is the first row's day at midnight (rows are expected in
    date order), or today when there are no rows.
    """
    if rows:
        header_dt = utils.utc_midnight(rows[0].date)
    else:
        header_dt = utils.utc_midnight(dt.datetime.now(dt.timezone.utc).date())

    header = Record100(
        version_header=canon.NEM12_VERSION,
        date_time=header_dt,
        from_participant=canon.FROM_PARTICIPANT,
        to_participant=canon.TO_PARTICIPANT,
    )

    # single meter per file
    nmi = rows[0].nmi if rows else canon.PLACEHOLDER_NMI
    serial = rows[0].meter_serial if rows else canon.PLACEHOLDER_SERIAL
    present = {r.register_type for r in rows}

    nmi_headers: list[Record200] = []
    for register in RegisterType:
        if register not in present:
            continue
        nmi_headers.append(
            Record200(
                nmi=nmi,
                nmi_configuration=register.value,
                register_id=register.value,
                nmi_suffix=register.value,
                mdm_data_stream_identifier="",
                meter_serial_number=serial,
                uom=canon.UOM,
                interval_length=interval_length,
            )
        )
    return header, nmi_headers


def map_to_intervals(
    rows: Sequence[CanonicalRow], interval_length: int
) -> dict[RegisterType, list[Record300]]:
    """
    Group rows by (register, date) and emit one zero-padded 300 record per group.

    Only the first row seen for a (register, date) pair is used; later ones
    are ignored. Blocks keep the order in which each date was first seen.
    """
    slots = expected_interval_count(interval_length)

    grouped: dict[RegisterType, dict[dt.date, CanonicalRow]] = {
        register: {} for register in RegisterType
    }
    for row in rows:
        grouped[row.register_type].setdefault(row.date, row)

    out: dict[RegisterType, list[Record300]] = {}
    for register, by_date in grouped.items():
        blocks: list[Record300] = []
        for day, row in by_date.items():
            values: list[float | None] = list(row.interval_values)
            if len(values) < slots:
                values.extend([0.0] * (slots - len(values)))
            blocks.append(
                Record300(
                    interval_date=utils.compact_date(day),
                    interval_values=values,
                    quality_method=canon.QUALITY_ACTUAL,
                )
            )
        out[register] = blocks
    return out


def assemble_nem12_file(rows: Sequence[CanonicalRow], interval_length: int) -> Nem12File:
    """Assemble a NEM12 document from canonical rows and an interval length."""
    header, nmi_headers = generate_header_and_meter_blocks(rows, interval_length)
    intervals = map_to_intervals(rows, interval_length)

    nmis: list[NmiBlock] = []
    for nmi_header in nmi_headers:
        register = RegisterType(nmi_header.nmi_configuration)
        blocks = intervals[register]
        if blocks:
            nmis.append(
                NmiBlock(
                    register_type=register,
                    nmi_header=nmi_header,
                    interval_blocks=blocks,
                )
            )
    return Nem12File(header=header, nmis=nmis)
