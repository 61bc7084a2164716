from __future__ import annotations

from typing import Any, Iterable, List

from .series import Series


class Sequence:
    """An arithmetic sequence given by its first element and the increment.

    Works for any start type supporting ``start + step``, e.g. datetimes with
    a timedelta step.
    """

    def __init__(self, start: Any = 0, step: Any = 1) -> None:
        self.start = start
        self.step = step

    def take(self, n: int) -> List[Any]:
        """Return the first n elements."""
        res: List[Any] = []
        cur = self.start
        for _ in range(n):
            res.append(cur)
            cur = cur + self.step
        return res


def sequence(size: int, start: Any = 0, step: Any = 1) -> List[Any]:
    return Sequence(start, step).take(size)


class AutoIndex(Sequence):
    """A rule creating a regularly spaced index for given values."""

    def zip_values(self, values: Iterable[Any]) -> Series:
        vals = list(values)
        return Series(self.take(len(vals)), vals)
