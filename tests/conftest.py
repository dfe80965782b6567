from datetime import datetime, timezone

import pytest

from edp.models import PriceSeries, Sample


def utc_ts(y, m, d, hh=0, mm=0, ss=0) -> int:
    return int(datetime(y, m, d, hh, mm, ss, tzinfo=timezone.utc).timestamp())


def make_series(pairs, unit="EUR / MWh", license_info="CC BY 4.0") -> PriceSeries:
    return PriceSeries(
        samples=[Sample(unix_seconds=ts, price=p, unit=unit) for ts, p in pairs],
        unit=unit,
        license_info=license_info,
    )


@pytest.fixture
def berlin_jan15_raw() -> PriceSeries:
    # target day 2024-01-15 in Europe/Berlin (UTC+1); response windowed by UTC date
    return make_series([
        (utc_ts(2024, 1, 14, 22, 0), 70.0),   # local 2024-01-14 23:00
        (utc_ts(2024, 1, 14, 23, 0), 81.5),   # local 00:00
        (utc_ts(2024, 1, 14, 23, 30), 79.0),  # local 00:30
        (utc_ts(2024, 1, 15, 11, 0), -5.25),  # local 12:00
        (utc_ts(2024, 1, 15, 22, 0), 95.0),   # local 23:00
        (utc_ts(2024, 1, 15, 23, 0), 60.0),   # local 2024-01-16 00:00
    ])
