from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

DEFAULT_REGION = "DE-LU"
DEFAULT_TIMEZONE = "Europe/Berlin"
DEFAULT_BASE_URL = "https://api.energy-charts.info"
DEFAULT_TIMEOUT = 60.0


def load_env():
    # repo root assumed one level up from the package: .../electricity-day-prices/edp/config.py
    root = Path(__file__).resolve().parents[1]
    load_dotenv(root / ".env", override=False)


@dataclass
class Settings:
    region: str = DEFAULT_REGION
    tz_name: str = DEFAULT_TIMEZONE
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    output_dir: str = "./data"

    @classmethod
    def from_env(cls) -> "Settings":
        load_env()
        timeout_raw = os.environ.get("EDP_HTTP_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(timeout_raw)
        except ValueError:
            raise ValueError(f"EDP_HTTP_TIMEOUT must be a number of seconds, got '{timeout_raw}'")
        return cls(
            region=os.environ.get("EDP_REGION", DEFAULT_REGION).strip(),
            tz_name=os.environ.get("EDP_TIMEZONE", DEFAULT_TIMEZONE).strip(),
            base_url=os.environ.get("EDP_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=timeout,
            output_dir=os.environ.get("EDP_OUTPUT_DIR", "./data"),
        )
