"""
Adapter: statystyki opisowe (menu "Statistics").

Domyślnie wariancja populacji (dzielnik n); sample=True → wariancja z próby (n-1).
Puste dane → ValueError.
"""
from __future__ import annotations

import math
import statistics
from typing import Sequence

from contracts import StatsSummary


def _require(data: Sequence[float], minimum: int = 1) -> list[float]:
    values = [float(v) for v in data]
    if len(values) < minimum:
        raise ValueError(f"Potrzeba co najmniej {minimum} wartości, jest {len(values)}")
    return values


def mean(data: Sequence[float]) -> float:
    return statistics.fmean(_require(data))


def variance(data: Sequence[float], sample: bool = False) -> float:
    if sample:
        return statistics.variance(_require(data, 2))
    return statistics.pvariance(_require(data))


def std_dev(data: Sequence[float], sample: bool = False) -> float:
    return math.sqrt(variance(data, sample=sample))


def summarize(data: Sequence[float], sample: bool = False) -> StatsSummary:
    values = _require(data, 2 if sample else 1)
    var = variance(values, sample=sample)
    return StatsSummary(
        count=len(values),
        mean=mean(values),
        variance=var,
        std_dev=math.sqrt(var),
        minimum=min(values),
        maximum=max(values),
        sample=sample,
    )
