# edp/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Iterator, List

from pydantic import BaseModel, model_validator


@dataclass(frozen=True)
class Sample:
    unix_seconds: int
    price: float
    unit: str

    @property
    def instant(self) -> datetime:
        # raises OverflowError / OSError / ValueError for out-of-range stamps
        return datetime.fromtimestamp(self.unix_seconds, tz=timezone.utc)


@dataclass
class PriceSeries:
    samples: List[Sample] = field(default_factory=list)
    unit: str = ""
    license_info: str = ""

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @property
    def prices(self) -> List[float]:
        return [s.price for s in self.samples]

    def with_samples(self, samples: List[Sample]) -> "PriceSeries":
        return PriceSeries(samples=list(samples), unit=self.unit, license_info=self.license_info)


@dataclass(frozen=True)
class CalendarDay:
    date: date
    tz_name: str

    def __str__(self) -> str:
        return f"{self.date.isoformat()} ({self.tz_name})"


@dataclass(frozen=True)
class QueryWindow:
    """UTC bounds of a local civil day: local 00:00:00 and local 23:59:59."""
    start_utc: datetime
    end_utc: datetime

    @property
    def start(self) -> str:
        return self.start_utc.strftime("%Y-%m-%d")

    @property
    def end(self) -> str:
        return self.end_utc.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class StatsSummary:
    mean: float = 0.0
    min: float = 0.0
    max: float = 0.0
    count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class EnergyChartsResponse(BaseModel):
    """Body of ``GET /price`` on the Energy-Charts API."""

    license_info: str
    unix_seconds: List[int]
    price: List[float]
    unit: str
    deprecated: bool = False

    @model_validator(mode="after")
    def _aligned(self) -> "EnergyChartsResponse":
        if len(self.unix_seconds) != len(self.price):
            raise ValueError(
                f"unix_seconds ({len(self.unix_seconds)}) and price ({len(self.price)}) differ in length"
            )
        return self

    def to_series(self) -> PriceSeries:
        samples = [
            Sample(unix_seconds=ts, price=p, unit=self.unit)
            for ts, p in zip(self.unix_seconds, self.price)
        ]
        return PriceSeries(samples=samples, unit=self.unit, license_info=self.license_info)
