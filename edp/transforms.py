import logging

import pandas as pd

from .date_range import get_zone
from .models import CalendarDay, PriceSeries

log = logging.getLogger(__name__)


def filter_to_day(series: PriceSeries, day: CalendarDay) -> PriceSeries:
    """
    Keep only the samples that fall on ``day`` in its own timezone.

    The service windows by UTC date, so a response usually carries a few hours
    of the neighbouring local days. Samples whose timestamp cannot be turned
    into a datetime are skipped.
    """
    tz = get_zone(day.tz_name)
    kept, dropped = [], 0
    for sample in series:
        try:
            local_date = sample.instant.astimezone(tz).date()
        except (OverflowError, OSError, ValueError, TypeError):
            dropped += 1
            continue
        if local_date == day.date:
            kept.append(sample)
    if dropped:
        log.warning("Dropped %d sample(s) with unconvertible timestamps for %s", dropped, day)
    return series.with_samples(kept)


def series_to_frame(series: PriceSeries, tz_name: str) -> pd.DataFrame:
    cols = ["ts_utc", "ts_local", "price", "unit"]
    # explicit dtypes keep an empty day concatenable with the others
    df = pd.DataFrame(
        {
            "unix_seconds": pd.Series([s.unix_seconds for s in series], dtype="int64"),
            "price": pd.Series(series.prices, dtype="float64"),
            "unit": pd.Series([s.unit for s in series], dtype="object"),
        }
    )
    df["ts_utc"] = pd.to_datetime(df["unix_seconds"], unit="s", utc=True)
    df["ts_local"] = df["ts_utc"].dt.tz_convert(tz_name)
    return df[cols].reset_index(drop=True)
