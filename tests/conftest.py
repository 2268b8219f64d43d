import pytest

from nem12convert.types import CanonicalRow, RegisterType

JEMENA_HEADER = "NMI,METER SERIAL NUMBER,CON/GEN,DATE,ESTIMATED?"
ORIGIN_HEADER = "Usage Type,Amount Used,From (date/time),To (date/time)"
POWERPAL_HEADER = "datetime_utc,datetime_local,watt_hours,cost_dollars,is_peak"


def _halfhour_cols():
    cols = []
    for i in range(48):
        s, e = i * 30, (i + 1) * 30 % 1440
        cols.append(f"{s // 60:02d}:{s % 60:02d} - {e // 60:02d}:{e % 60:02d}")
    return cols


@pytest.fixture
def jemena_csv():
    # Two days of E1 and one day of E2, 48 half-hour columns
    header = ",".join([JEMENA_HEADER, *_halfhour_cols()])
    vals = ",".join(["0.1"] * 48)
    return (
        f"{header}\n"
        f"6001204490,000000000000321347,Consumption,2023-07-19,No,{vals}\n"
        f"6001204490,000000000000321347,Controlled Load Consumption,2023-07-19,Yes,{vals}\n"
        f"6001204490,000000000000321347,Consumption,2023-07-20,No,{vals}\n"
    ).encode()


@pytest.fixture
def origin_csv():
    return (
        f"{ORIGIN_HEADER}\n"
        "Consumption,1.23,2023-01-01T00:00:00,2023-01-01T00:30:00\n"
        "Consumption,2.34,2023-01-01T00:30:00,2023-01-01T01:00:00\n"
        "Consumption,3.45,2023-01-01T01:00:00,2023-01-01T01:30:00\n"
    ).encode()


@pytest.fixture
def powerpal_csv():
    return (
        f"{POWERPAL_HEADER}\n"
        "2024-07-27 00:00:00,2024-07-27 10:00:00,1230,0.0008190972,false\n"
        "2024-07-27 01:00:00,2024-07-27 11:00:00,500,0.0008190972,false\n"
        "2024-07-28 00:00:00,2024-07-28 10:00:00,250,0.0008190972,true\n"
    ).encode()


@pytest.fixture
def mixed_rows():
    # E1 and E2 on the same day plus a second E1 day
    return [
        CanonicalRow(
            date="2023-01-01",
            interval_values=[1, 2, 3],
            register_type=RegisterType.E1,
            nmi="TESTNMI",
            meter_serial="TESTSERIAL",
        ),
        CanonicalRow(
            date="2023-01-01",
            interval_values=[4, 5, 6],
            register_type=RegisterType.E2,
            nmi="TESTNMI",
            meter_serial="TESTSERIAL",
            estimated=True,
        ),
        CanonicalRow(
            date="2023-01-02",
            interval_values=[7],
            register_type=RegisterType.E1,
            nmi="TESTNMI",
            meter_serial="TESTSERIAL",
        ),
    ]
