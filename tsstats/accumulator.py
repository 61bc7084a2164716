from __future__ import annotations

from typing import Any, Generic, Type, TypeVar

from .apply import apply_pairs
from .core.na import NaPolicy
from .core.series import Series
from .filters.rolling_mean import RollingMean
from .filters.rolling_median import RollingMedian


F = TypeVar("F")


class Accumulator(Generic[F]):
    """Pushes values to a filter and stores its output in a series.

    For every ``(timestamp, value)``:

    - the filter is updated unless the value is NA and ``skip_na_input`` is set
    - ``(timestamp, filter.value())`` is appended to the output unless that
      output is NA and ``skip_na_output`` is set

    Output timestamps are therefore a subsequence of the input timestamps.
    """

    def __init__(
        self,
        flt: F,
        skip_na_input: bool = True,
        skip_na_output: bool = True,
        input_kind: Type[Any] = float,
        output_kind: Type[Any] = float,
    ) -> None:
        self.filter = flt
        self.skip_na_input = skip_na_input
        self.skip_na_output = skip_na_output
        self._input_na = NaPolicy.for_kind(input_kind)
        self._output_na = NaPolicy.for_kind(output_kind)
        self._output = Series()

    def update(self, timestamp: Any, value: Any) -> None:
        if not (self.skip_na_input and self._input_na.is_na(value)):
            self.filter.update(value)  # type: ignore[attr-defined]
        out = self.filter.value()  # type: ignore[attr-defined]
        if self.skip_na_output and self._output_na.is_na(out):
            return
        self._output.append(timestamp, out)

    def value(self) -> Series:
        return self._output


def accumulate(
    series: Series,
    flt: Any,
    skip_na_input: bool = True,
    skip_na_output: bool = True,
) -> Series:
    """Run a filter over a series and return the series of its outputs."""
    acc = Accumulator(flt, skip_na_input=skip_na_input, skip_na_output=skip_na_output)
    return apply_pairs(series, acc).value()


def rolling_mean(series: Series, window_size: int) -> Series:
    return accumulate(series, RollingMean(window_size))


def rolling_median(series: Series, window_size: int) -> Series:
    return accumulate(series, RollingMedian(window_size))
