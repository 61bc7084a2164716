from __future__ import annotations

import math

from ..core.buffers import CircularBuffer
from ..exceptions import ContractViolation


class RollingMean:
    """Simple moving average over a circular buffer.

    The filter is ready only once ``window_size`` observations were processed;
    before that ``value()`` is NA.
    """

    def __init__(self, window_size: int) -> None:
        if window_size < 1:
            raise ContractViolation(
                f"RollingMean(): window_size must be at least 1, got {window_size}"
            )
        self.window_size = window_size
        self._mean: float = 0.0
        self._k: float = 1.0 / window_size
        self._buf: CircularBuffer[float] = CircularBuffer(window_size)

    def ready(self) -> bool:
        return self._buf.full()

    def value(self) -> float:
        return self._mean if self.ready() else math.nan

    def update(self, x: float) -> float:
        """Put a new observation in the window and return the running mean."""
        if self._buf.full():
            old = self._buf.write(x)
            self._mean += self._k * (x - old)  # type: ignore[operator]
        else:
            self._buf.write(x)
            self._mean += self._k * x
        return self._mean
