# edp/cli.py
from __future__ import annotations
import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import List, Optional

import pandas as pd

from .config import Settings
from .daily import DayReport, run_day, run_days
from .date_range import day_range, get_zone
from .energy_charts_client import EnergyChartsClient
from .errors import DecodeError, TransportError
from .io_local import write_frame
from .transforms import series_to_frame

log = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="edp",
        description="Day-ahead electricity spot prices for one local day, from the Energy-Charts API.",
    )
    p.add_argument("--date", help="Local delivery day YYYY-MM-DD (default: today in --tz)")
    p.add_argument("--end-date", help="Last local day YYYY-MM-DD; reports every day from --date to here")
    p.add_argument("--tz", default=settings.tz_name, help=f"IANA timezone of the civil day (default {settings.tz_name})")
    p.add_argument("--region", default=settings.region, help=f"Bidding zone code (default {settings.region})")
    p.add_argument("--show", type=int, default=5, help="Number of hourly prices to list (default 5)")
    p.add_argument("--output", help="Write the filtered series to this .csv or .parquet path")
    p.add_argument("--workers", type=int, default=1, help="Days fetched in parallel with --end-date")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def format_report(report: DayReport, show: int = 5) -> str:
    s, unit = report.summary, report.series.unit
    lines = [
        f"Region {report.region}, day {report.day}",
        f"Query window (UTC): {report.window.start_utc:%Y-%m-%d %H:%M:%S} -> "
        f"{report.window.end_utc:%Y-%m-%d %H:%M:%S} [start={report.window.start} end={report.window.end}]",
    ]
    if report.series.license_info:
        lines.append(f"License: {report.series.license_info}")
    if s.is_empty:
        lines.append("No price data available")
        return "\n".join(lines)
    lines += [
        "",
        f"Average Price: {s.mean:.2f} {unit}",
        f"Lowest Price:  {s.min:.2f} {unit}",
        f"Highest Price: {s.max:.2f} {unit}",
        f"Data Points:   {s.count}",
    ]
    if show > 0:
        tz = get_zone(report.day.tz_name)
        lines += ["", f"First {min(show, s.count)} prices:"]
        for sample in report.series.samples[:show]:
            lines.append(f"   {sample.instant.astimezone(tz):%H:%M}: {sample.price:.2f} {sample.unit}")
        if s.count > show:
            lines.append(f"   ... and {s.count - show} more")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None, now: Optional[datetime] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        get_zone(args.tz)
        if args.end_date and not args.date:
            raise ValueError("--end-date requires --date")
        if args.date:
            day_range(args.date, args.end_date or args.date)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    client = EnergyChartsClient(base_url=settings.base_url, timeout=settings.timeout)
    try:
        if args.date:
            reports = run_days(
                args.date, args.end_date or args.date, args.tz, args.region,
                client.get_prices, max_workers=args.workers,
            )
        else:
            reports = [run_day(now or datetime.now(timezone.utc), args.tz, args.region, client.get_prices)]
    except (TransportError, DecodeError) as e:
        print(f"Error retrieving electricity prices: {e}", file=sys.stderr)
        return 1

    for i, report in enumerate(reports):
        if i:
            print()
        print(format_report(report, show=args.show))

    if args.output:
        frames = [series_to_frame(r.series, args.tz) for r in reports]
        filled = [f for f in frames if not f.empty]
        if len(filled) > 1:
            df = pd.concat(filled, ignore_index=True)
        else:
            df = (filled or frames)[0]
        path = write_frame(df, args.output, output_dir=settings.output_dir)
        print(f"\nWrote {len(df)} rows to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
