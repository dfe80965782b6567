import importlib.util
from pathlib import Path

import pytest

DAG_FILE = Path(__file__).resolve().parents[1] / "airflow" / "dags" / "day_price_stats.py"


def test_dag_uses_shared_settings(monkeypatch):
    pytest.importorskip("airflow")
    monkeypatch.setenv("EDP_BASE_URL", "http://prices.internal/")
    monkeypatch.setenv("EDP_HTTP_TIMEOUT", "7")
    monkeypatch.setenv("EDP_TIMEZONE", "Europe/Vienna")
    monkeypatch.setenv("EDP_REGION", "AT")
    monkeypatch.delenv("EDP_REGIONS", raising=False)

    spec = importlib.util.spec_from_file_location("day_price_stats", DAG_FILE)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    assert module.SETTINGS.base_url == "http://prices.internal"
    assert module.SETTINGS.timeout == 7.0
    assert module.TZ == "Europe/Vienna"
    assert module.REGIONS == ["AT"]
