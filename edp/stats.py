import math

from .models import PriceSeries, StatsSummary


def summarize(series: PriceSeries) -> StatsSummary:
    prices = series.prices
    if not prices:
        return StatsSummary()
    n = len(prices)
    lo, hi = min(prices), max(prices)
    # rounding can push the mean of equal prices just outside [lo, hi]
    mean = math.fsum(p / n for p in prices)
    return StatsSummary(
        mean=min(max(mean, lo), hi),
        min=lo,
        max=hi,
        count=n,
    )
