# edp/energy_charts_client.py
from __future__ import annotations
import logging
import requests
from pydantic import ValidationError

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .errors import DecodeError, TransportError
from .models import EnergyChartsResponse, PriceSeries, QueryWindow

log = logging.getLogger(__name__)


class EnergyChartsClient:
    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout or DEFAULT_TIMEOUT

    def _get(self, path: str, params: dict) -> object:
        url = f"{self.base_url}/{path.lstrip('/')}"
        log.info("Request to Energy-Charts API: %s %s", url, params)
        try:
            r = requests.get(
                url,
                params=params,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        except requests.RequestException as e:
            raise TransportError(f"Error sending HTTP request to {url}: {e}") from e
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            # surface API error body for debugging
            body = (r.text or "")[:2000]
            raise TransportError(f"API request failed: {e} | body: {body}") from e
        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"Error parsing JSON response: {e}") from e

    def get_prices(self, window: QueryWindow, region: str) -> PriceSeries:
        """
        Day-ahead spot prices for bidding zone ``region``.

        The service selects by UTC date, so ``window.start``/``window.end`` are
        passed as-is and the result may reach into the neighbouring local days.
        Returns the series in response order, unfiltered.
        """
        doc = self._get("price", {"bzn": region, "start": window.start, "end": window.end})
        try:
            body = EnergyChartsResponse.model_validate(doc)
        except ValidationError as e:
            raise DecodeError(f"Unexpected response structure: {e}") from e
        return body.to_series()
