from __future__ import annotations
from enum import Enum
from typing import List, Literal, Optional, Tuple
import datetime as dt

from pydantic import BaseModel, Field


class RegisterType(str, Enum):
    """NEM12 register suffixes a source row can map to."""

    E1 = "E1"  # general consumption
    E2 = "E2"  # controlled load consumption


class CanonicalRow(BaseModel):
    """One day of readings for one register, as produced by every adapter.

    Attributes:
        date: Calendar day the readings belong to
        interval_values: kWh readings from midnight onwards, possibly short of a full day
        register_type: Register the readings belong to
        nmi: National Metering Identifier (or placeholder)
        meter_serial: Meter serial number (or placeholder)
        estimated: Whether the source flagged the readings as estimated
    """

    date: dt.date
    interval_values: Tuple[float, ...]
    register_type: RegisterType
    nmi: str
    meter_serial: str
    estimated: bool = False
    model_config = {"frozen": True}


# NEM12 records
class Record100(BaseModel):
    record_indicator: Literal["100"] = "100"
    version_header: str
    date_time: dt.datetime
    from_participant: str
    to_participant: str


class Record200(BaseModel):
    record_indicator: Literal["200"] = "200"
    nmi: str
    nmi_configuration: str
    register_id: str
    nmi_suffix: str
    mdm_data_stream_identifier: Optional[str] = None
    meter_serial_number: Optional[str] = None
    uom: str
    interval_length: int
    next_scheduled_read_date: Optional[dt.datetime] = None


class Record300(BaseModel):
    record_indicator: Literal["300"] = "300"
    interval_date: str  # YYYYMMDD
    interval_values: List[Optional[float]]
    quality_method: str
    reason_code: Optional[int] = None
    reason_description: Optional[str] = None
    update_date_time: Optional[dt.datetime] = None
    msats_load_date_time: Optional[dt.datetime] = None


class Record400(BaseModel):
    record_indicator: Literal["400"] = "400"
    start_interval: int
    end_interval: int
    quality_method: str
    reason_code: Optional[int] = None
    reason_description: Optional[str] = None


class Record900(BaseModel):
    record_indicator: Literal["900"] = "900"


class NmiBlock(BaseModel):
    """A 200 record with the 300 (and optional 400) records that follow it."""

    register_type: RegisterType
    nmi_header: Record200
    interval_blocks: List[Record300]
    event_records: Optional[List[Record400]] = None


class Nem12File(BaseModel):
    header: Record100
    nmis: List[NmiBlock] = Field(default_factory=list)
    trailer: Record900 = Field(default_factory=Record900)

    def __str__(self) -> str:
        from .serialize import serialize_nem12

        return serialize_nem12(self)
