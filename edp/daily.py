# edp/daily.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List
import logging

from .date_range import day_range, resolve_date, resolve_day
from .models import CalendarDay, PriceSeries, QueryWindow, StatsSummary
from .stats import summarize
from .transforms import filter_to_day

log = logging.getLogger(__name__)

Fetch = Callable[[QueryWindow, str], PriceSeries]


@dataclass
class DayReport:
    day: CalendarDay
    window: QueryWindow
    series: PriceSeries      # already narrowed to ``day``
    summary: StatsSummary
    region: str = ""
    raw_count: int = 0


def _run(day: CalendarDay, window: QueryWindow, region: str, fetch: Fetch) -> DayReport:
    raw = fetch(window, region)
    series = filter_to_day(raw, day)
    summary = summarize(series)
    log.info(
        "%s %s: %d of %d samples on the local day [%s -> %s]",
        region, day, len(series), len(raw), window.start, window.end,
    )
    return DayReport(day=day, window=window, series=series, summary=summary, region=region, raw_count=len(raw))


def run_date(civil_date: date, tz_name: str, region: str, fetch: Fetch) -> DayReport:
    day, window = resolve_date(civil_date, tz_name)
    return _run(day, window, region, fetch)


def run_day(now_utc: datetime, tz_name: str, region: str, fetch: Fetch) -> DayReport:
    day, window = resolve_day(now_utc, tz_name)
    return _run(day, window, region, fetch)


def run_days(
    start_ymd: str,
    end_ymd: str,
    tz_name: str,
    region: str,
    fetch: Fetch,
    max_workers: int = 1,
) -> List[DayReport]:
    """One report per civil date in [start_ymd, end_ymd], in date order."""
    dates = day_range(start_ymd, end_ymd)
    if max_workers <= 1 or len(dates) <= 1:
        return [run_date(d, tz_name, region, fetch) for d in dates]
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda d: run_date(d, tz_name, region, fetch), dates))
