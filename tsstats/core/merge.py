from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Tuple

from ..exceptions import SizeMismatch
from .series import Series


class MergeCursor:
    """Read position in one series, valid for a single traversal."""

    def __init__(self, series: Series) -> None:
        self._index = series.index_view()
        self._values = series.values_view()
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._index)

    def timestamp(self) -> Any:
        return self._index[self._pos]

    def value(self) -> Any:
        return self._values[self._pos]

    def advance(self) -> None:
        self._pos += 1


class MergeIterator:
    """Merges several series on their timestamps.

    At each step the current observation is the pending one with the smallest
    timestamp. Equal timestamps in different series are reported one after
    another, lowest series index first.
    """

    def __init__(self, cursors: List[MergeCursor]) -> None:
        self._cursors = cursors
        self._cur = -1
        self._set_current()

    @classmethod
    def from_series(cls, series: Iterable[Series]) -> "MergeIterator":
        return cls([MergeCursor(s) for s in series])

    def _set_current(self) -> None:
        self._cur = -1
        for i, c in enumerate(self._cursors):
            if c.at_end():
                continue
            if self._cur == -1 or c.timestamp() < self._cursors[self._cur].timestamp():
                self._cur = i

    def current(self) -> int:
        """Index of the series the current observation comes from."""
        return self._cur

    def _current_cursor(self) -> MergeCursor:
        if self._cur == -1:
            raise SizeMismatch("merge iterator exhausted")
        return self._cursors[self._cur]

    def timestamp(self) -> Any:
        return self._current_cursor().timestamp()

    def value(self) -> Any:
        return self._current_cursor().value()

    def advance(self) -> None:
        self._current_cursor().advance()
        self._set_current()

    def at_end(self) -> bool:
        return self._cur == -1

    def n_series(self) -> int:
        return len(self._cursors)

    def __iter__(self) -> Iterator[Tuple[int, Any, Any]]:
        while not self.at_end():
            yield self._cur, self.timestamp(), self.value()
            self.advance()


class SeriesCollection(List[Series]):
    """A list of series which can be traversed in timestamp order."""

    def merge_iterator(self) -> MergeIterator:
        return MergeIterator.from_series(self)
