from __future__ import annotations


class CountingFilter:
    """An estimator counting the number of elements it has processed."""

    def __init__(self) -> None:
        self._n: int = 0

    def _inc(self) -> int:
        self._n += 1
        return self._n

    def n_processed(self) -> int:
        return self._n


class DeterministicallyValidFilter(CountingFilter):
    """An estimator becoming ready after a fixed number of observations.

    Readiness depends only on how many updates were made, not on whether the
    values were valid.
    """

    def __init__(self, required_input_size: int) -> None:
        super().__init__()
        self.required_input_size = required_input_size

    def ready(self) -> bool:
        return self.n_processed() >= self.required_input_size
