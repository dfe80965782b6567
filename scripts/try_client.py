# scripts/try_client.py
from datetime import datetime, timezone
import sys
sys.path.append(".")

from edp.config import Settings
from edp.date_range import resolve_day
from edp.energy_charts_client import EnergyChartsClient
from edp.transforms import filter_to_day

settings = Settings.from_env()

# Today in the configured zone, and the UTC dates the API has to be asked for
day, window = resolve_day(datetime.now(timezone.utc), settings.tz_name)

c = EnergyChartsClient(settings.base_url, settings.timeout)
raw = c.get_prices(window, settings.region)
series = filter_to_day(raw, day)
print(f"Fetched {len(raw)} points for {settings.region}, kept {len(series)} on {day} "
      f"→ [{window.start_utc:%Y-%m-%d %H:%M}Z, {window.end_utc:%Y-%m-%d %H:%M}Z]")
for s in series.samples[:5]:
    print(s)
