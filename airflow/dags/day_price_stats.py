from __future__ import annotations
import os
from datetime import datetime, timedelta, timezone
from airflow import DAG
from airflow.decorators import task
from edp.config import Settings
from edp.daily import run_day
from edp.energy_charts_client import EnergyChartsClient
from edp.io_local import write_frame
from edp.transforms import series_to_frame

SETTINGS = Settings.from_env()
TZ = SETTINGS.tz_name
REGIONS = [r.strip() for r in os.environ.get("EDP_REGIONS", SETTINGS.region).split(",") if r.strip()]

default_args = {"owner": "data-eng", "retries": 2, "retry_delay": timedelta(minutes=5)}

with DAG(
    dag_id="day_price_stats",
    default_args=default_args,
    start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    schedule="0 13 * * *",
    catchup=True,
    max_active_runs=1,
    tags=["energy-charts", "prices", "dayahead"],
) as dag:

    @task
    def fetch_day(region: str, logical_date=None):
        # one run per region; each run resolves its own local day from the logical date
        client = EnergyChartsClient(SETTINGS.base_url, SETTINGS.timeout)
        report = run_day(logical_date, TZ, region, client.get_prices)
        relpath = f"day_prices/region={region}/date={report.day.date.isoformat()}/prices.parquet"
        write_frame(series_to_frame(report.series, TZ), relpath, output_dir=SETTINGS.output_dir)
        s = report.summary
        return {"path": relpath, "count": s.count, "mean": s.mean, "min": s.min, "max": s.max}

    fetch_day.expand(region=REGIONS)
