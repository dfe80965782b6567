import threading
from datetime import date, datetime, timezone

import pytest

from edp.daily import run_date, run_day, run_days
from edp.errors import TransportError

from conftest import make_series, utc_ts


def fake_fetch_factory(raw_by_start=None):
    calls = []
    lock = threading.Lock()

    def fetch(window, region):
        with lock:
            calls.append((window.start, window.end, region))
        if raw_by_start is not None:
            return raw_by_start.get(window.start, make_series([]))
        # whole UTC days from start to end, hourly, price = hour of the day
        d0 = datetime.strptime(window.start, "%Y-%m-%d").date()
        d1 = datetime.strptime(window.end, "%Y-%m-%d").date()
        pairs = []
        for d in (d0, d1) if d0 != d1 else (d0,):
            pairs += [(utc_ts(d.year, d.month, d.day, h), float(h)) for h in range(24)]
        return make_series(pairs)

    return fetch, calls


def test_run_day_filters_and_summarizes():
    fetch, calls = fake_fetch_factory()
    report = run_day(datetime(2024, 1, 15, 10, tzinfo=timezone.utc), "Europe/Berlin", "DE-LU", fetch)

    assert calls == [("2024-01-14", "2024-01-15", "DE-LU")]
    assert report.day.date == date(2024, 1, 15)
    assert report.region == "DE-LU"
    assert report.raw_count == 48
    assert report.summary.count == 24
    # local 00:00 is 23:00 UTC of the previous day
    assert report.series.prices[0] == 23.0
    assert report.series.prices[1:] == [float(h) for h in range(23)]


def test_run_date_on_spring_forward_day():
    fetch, _ = fake_fetch_factory()
    report = run_date(date(2024, 3, 31), "Europe/Berlin", "DE-LU", fetch)
    assert report.summary.count == 23


def test_run_date_empty_day_gives_sentinel():
    fetch, _ = fake_fetch_factory(raw_by_start={})
    report = run_date(date(2024, 1, 15), "Europe/Berlin", "DE-LU", fetch)
    assert report.summary.count == 0
    assert (report.summary.mean, report.summary.min, report.summary.max) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("workers", [1, 3])
def test_run_days_keeps_date_order(workers):
    fetch, calls = fake_fetch_factory()
    reports = run_days("2024-10-26", "2024-10-28", "Europe/Berlin", "DE-LU", fetch, max_workers=workers)
    assert [r.day.date for r in reports] == [date(2024, 10, 26), date(2024, 10, 27), date(2024, 10, 28)]
    assert [r.summary.count for r in reports] == [24, 25, 24]
    assert len(calls) == 3


def test_transport_error_propagates():
    def fetch(window, region):
        raise TransportError("boom")

    with pytest.raises(TransportError, match="boom"):
        run_date(date(2024, 1, 15), "Europe/Berlin", "DE-LU", fetch)
