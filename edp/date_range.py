# edp/date_range.py
from __future__ import annotations
from datetime import date, datetime, time, timedelta
from typing import List, Tuple

import pytz

from .models import CalendarDay, QueryWindow

DAY_START = time(0, 0, 0)
DAY_END = time(23, 59, 59)


def get_zone(tz_name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        raise ValueError(f"Unknown timezone '{tz_name}'. Use an IANA name such as 'Europe/Berlin'")


def localize(tz: pytz.BaseTzInfo, naive: datetime, earliest: bool = True) -> datetime:
    """
    Attach ``tz`` to a naive local datetime using the offset in force at that moment.

    A local time inside a spring-forward gap does not exist; it is moved forward
    by the length of the gap (02:30 on a 02:00->03:00 night becomes 03:30).
    A local time repeated by a fall-back transition resolves to its first
    occurrence when ``earliest`` is set, otherwise to the second one.
    """
    try:
        return tz.localize(naive, is_dst=None)
    except pytz.NonExistentTimeError:
        return tz.normalize(tz.localize(naive, is_dst=False))
    except pytz.AmbiguousTimeError:
        return tz.localize(naive, is_dst=earliest)


def resolve_date(civil_date: date, tz_name: str) -> Tuple[CalendarDay, QueryWindow]:
    tz = get_zone(tz_name)
    start_local = localize(tz, datetime.combine(civil_date, DAY_START), earliest=True)
    end_local = localize(tz, datetime.combine(civil_date, DAY_END), earliest=False)
    window = QueryWindow(
        start_utc=start_local.astimezone(pytz.UTC),
        end_utc=end_local.astimezone(pytz.UTC),
    )
    return CalendarDay(date=civil_date, tz_name=tz_name), window


def resolve_day(now_utc: datetime, tz_name: str) -> Tuple[CalendarDay, QueryWindow]:
    """Civil day containing ``now_utc`` in ``tz_name``, and its UTC query window."""
    if now_utc.tzinfo is None:
        now_utc = pytz.UTC.localize(now_utc)
    local_now = now_utc.astimezone(get_zone(tz_name))
    return resolve_date(local_now.date(), tz_name)


def day_range(start_ymd: str, end_ymd: str) -> List[date]:
    s = datetime.strptime(start_ymd, "%Y-%m-%d").date()
    e = datetime.strptime(end_ymd, "%Y-%m-%d").date()
    out, cur = [], s
    while cur <= e:
        out.append(cur)
        cur += timedelta(days=1)
    return out
