"""Single-timestamp watt-hour adapter."""

import datetime as dt

import pytest

from nem12convert import exceptions
from nem12convert.adapters import PowerpalAdapter, convert_to_nem12
from nem12convert.types import RegisterType

HEADER = "datetime_utc,datetime_local,watt_hours,cost_dollars,is_peak"


def test_is_valid():
    valid = (
        f"{HEADER}\n2024-07-27 00:00:00,2024-07-27 10:00:00,0.0000000000,0.0008190972,false"
    ).encode()
    assert PowerpalAdapter().is_valid(valid)
    assert not PowerpalAdapter().is_valid(b"foo,bar,baz\n1,2,3")


def test_is_valid_rejects_non_numeric_reading():
    buf = f"{HEADER}\n2024-07-27 00:00:00,2024-07-27 10:00:00,lots,0.1,false".encode()
    assert not PowerpalAdapter().is_valid(buf)


def test_interval_length_one_minute():
    buf = (
        f"{HEADER}\n"
        "2024-07-27 00:00:00,2024-07-27 10:00:00,0.0,0.0008190972,false\n"
        "2024-07-27 00:01:00,2024-07-27 10:01:00,0.0,0.0008190972,false\n"
    ).encode()
    assert PowerpalAdapter().get_interval_length(buf) == 1


def test_interval_length_skips_duplicate_timestamps():
    buf = (
        f"{HEADER}\n"
        "2024-07-27 00:00:00,x,1,0,false\n"
        "2024-07-27 00:00:00,x,1,0,false\n"
        "2024-07-27 00:30:00,x,1,0,false\n"
    ).encode()
    assert PowerpalAdapter().get_interval_length(buf) == 30


@pytest.mark.parametrize(
    "buf",
    [
        f"{HEADER}\nfoo,bar,baz,qux,quux\n".encode(),
        b"",
        f"{HEADER}\n2024-07-27 00:00:00,x,1,0,false\n".encode(),
    ],
    ids=["no-valid-rows", "empty", "single-row"],
)
def test_interval_length_returns_zero_instead_of_raising(buf):
    assert PowerpalAdapter().get_interval_length(buf) == 0


def test_parse_rows_converts_watt_hours():
    buf = (
        f"{HEADER}\n"
        "2024-07-27 00:00:00,2024-07-27 10:00:00,1.23,0.0008190972,false\n"
        "2024-07-27 00:01:00,2024-07-27 10:01:00,2.34,0.0008190972,false\n"
    ).encode()
    rows = PowerpalAdapter().parse_rows(buf)
    assert len(rows) == 1
    row = rows[0]
    assert row.date == dt.date(2024, 7, 27)
    assert row.interval_values == pytest.approx((0.00123, 0.00234))
    assert row.register_type == RegisterType.E1
    assert row.nmi == "9999999999"
    assert row.meter_serial == "55555555"


def test_parse_rows_kwh_value(powerpal_csv):
    rows = PowerpalAdapter().parse_rows(powerpal_csv)
    assert [r.date for r in rows] == [dt.date(2024, 7, 27), dt.date(2024, 7, 28)]
    assert rows[0].interval_values == (1.23, 0.5)
    assert rows[1].interval_values == (0.25,)


def test_parse_rows_header_only_or_empty():
    assert PowerpalAdapter().parse_rows(f"{HEADER}\n".encode()) == []
    assert PowerpalAdapter().parse_rows(b"") == []


def test_convert_hourly(powerpal_csv):
    nem12 = convert_to_nem12(PowerpalAdapter(), powerpal_csv)
    block = nem12.nmis[0]
    assert block.nmi_header.interval_length == 60
    assert [len(b.interval_values) for b in block.interval_blocks] == [24, 24]


def test_convert_zero_interval_length_is_a_conversion_error():
    buf = f"{HEADER}\n2024-07-27 00:00:00,x,1,0,false\n".encode()
    with pytest.raises(exceptions.ConversionError, match="Unable to determine interval length"):
        convert_to_nem12(PowerpalAdapter(), buf)


def test_interval_length_skips_mixed_timezone_rows():
    buf = (
        f"{HEADER}\n"
        "2024-07-27 00:00:00,x,1,0,false\n"
        "2024-07-27 00:30:00+00:00,x,1,0,false\n"
        "2024-07-27 01:00:00,x,1,0,false\n"
    ).encode()
    assert PowerpalAdapter().get_interval_length(buf) == 60


@pytest.mark.parametrize("buf", [b"\xff\xfe\x00bad", b"\n", b"\r\n\r\n"])
def test_is_valid_never_raises(buf):
    assert PowerpalAdapter().is_valid(buf) is False
