from __future__ import annotations

import copy
import math
from typing import Any, List, Tuple

from sortedcontainers import SortedList

from ..core.buffers import CircularBuffer
from ..exceptions import ContractViolation, InternalInvariantViolation


# (is NaN, value or 0.0 for NaN, slot)
Key = Tuple[bool, Any, int]

LOWER = 0
UPPER = 1


def _key(value: Any, slot: int) -> Key:
    if math.isnan(value):
        return (True, 0.0, slot)
    return (False, value, slot)


def _key_value(key: Key) -> Any:
    return math.nan if key[0] else key[1]


class RollingMedian:
    """Rolling median over a fixed window.

    The values of the current window live in a circular buffer. Each slot of
    the buffer belongs to one of two sorted partitions, ``lower`` and
    ``upper``. Every key in ``lower`` is smaller than any key in ``upper``
    and the sizes of the partitions differ by at most one, so the median is
    found at the boundary between them.

    Partition entries are ``(is_nan, value, slot)`` keys rather than bare
    slots compared through the buffer. NaN sorts after every number, so the
    order stays total while a missing value passes through the window, and
    the filter can be deep-copied without rebinding anything to the new
    buffer. The median is NaN while the window holds a NaN.

    The filter is ready once ``window_size`` observations were processed.
    """

    def __init__(self, window_size: int) -> None:
        if window_size < 2:
            raise ContractViolation(
                f"RollingMedian(): window_size must be at least 2, got {window_size}"
            )
        self.window_size = window_size
        self._buf: CircularBuffer[Any] = CircularBuffer(window_size)
        self._lower: SortedList = SortedList()
        self._upper: SortedList = SortedList()
        self._side: List[int] = [UPPER] * window_size
        self._n_na = 0

    def ready(self) -> bool:
        return self._buf.full()

    def value(self) -> Any:
        if not self.ready() or self._n_na:
            return math.nan
        return self._median()

    def update(self, x: Any) -> Any:
        """Put a new observation in the window and return the median (NA until ready)."""
        slot = self._buf.pos()
        if self._buf.full():
            self._remove(slot)
        self._buf.write(x)
        key = _key(x, slot)
        if key[0]:
            self._n_na += 1
        self._insert(self._side_for(key), key)
        self._rebalance()
        return self.value()

    def lower_values(self) -> List[Any]:
        return [_key_value(k) for k in self._lower]

    def upper_values(self) -> List[Any]:
        return [_key_value(k) for k in self._upper]

    def copy(self) -> "RollingMedian":
        return copy.deepcopy(self)

    def __copy__(self) -> "RollingMedian":
        return self.copy()

    def _partition(self, side: int) -> SortedList:
        return self._lower if side == LOWER else self._upper

    def _side_for(self, key: Key) -> int:
        if self._upper:
            return LOWER if key < self._upper[0] else UPPER
        if self._lower and key < self._lower[-1]:
            return LOWER
        return UPPER

    def _median(self) -> Any:
        k = len(self._upper) - len(self._lower)
        if k == 0:
            return (_key_value(self._lower[-1]) + _key_value(self._upper[0])) / 2.0
        if k == 1:
            return _key_value(self._upper[0])
        if k == -1:
            return _key_value(self._lower[-1])
        raise InternalInvariantViolation(
            f"Sizes of the lower ({len(self._lower)}) and upper ({len(self._upper)}) "
            "partitions differ by more than one"
        )

    def _insert(self, side: int, key: Key) -> None:
        self._partition(side).add(key)
        self._side[key[2]] = side

    def _remove(self, slot: int) -> None:
        key = _key(self._buf[slot], slot)
        try:
            self._partition(self._side[slot]).remove(key)
        except ValueError:
            raise InternalInvariantViolation(f"Slot {slot} missing from its partition") from None
        if key[0]:
            self._n_na -= 1

    def _rebalance(self) -> None:
        # one removal and one insertion leave a gap of at most three
        k = len(self._upper) - len(self._lower)
        if k > 1:
            self._insert(LOWER, self._upper.pop(0))
        elif k < -1:
            self._insert(UPPER, self._lower.pop())
