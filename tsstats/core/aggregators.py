"""Aggregators reducing a run of observations to a single value.

Used when aligning two series: all values of one side up to the next shared
timestamp are folded into one representative value. NA inputs never change
the aggregate, and an aggregator which has seen no valid value reports NA.
"""

from __future__ import annotations

import math
from typing import Dict, Type


class Aggregator:
    name: str = ""

    def __init__(self) -> None:
        self._value: float = math.nan

    def __call__(self, x: float) -> None:
        if math.isnan(x):
            return
        self._update(x)

    def _update(self, x: float) -> None:
        raise NotImplementedError

    def value(self) -> float:
        return self._value


class Sum(Aggregator):
    """Sum of the values; NA acts as the additive identity."""

    name = "sum"

    def _update(self, x: float) -> None:
        self._value = x if math.isnan(self._value) else self._value + x


class First(Aggregator):
    """Remembers the first non-NA value of the run."""

    name = "first"

    def _update(self, x: float) -> None:
        if math.isnan(self._value):
            self._value = x


class Last(Aggregator):
    """Remembers the most recent non-NA value of the run."""

    name = "last"

    def _update(self, x: float) -> None:
        self._value = x


AGGREGATORS: Dict[str, Type[Aggregator]] = {
    cls.name: cls for cls in (Sum, First, Last)
}


def get_aggregator(name: str) -> Type[Aggregator]:
    try:
        return AGGREGATORS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown aggregator {name!r}; expected one of {sorted(AGGREGATORS)}"
        ) from None
