from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import pandas as pd

from ..exceptions import KeyNotFound, OrderViolation, SizeMismatch


class Observation(NamedTuple):
    timestamp: Any
    value: Any


def _is_strictly_increasing(index: Sequence[Any]) -> bool:
    return all(a < b for a, b in zip(index, index[1:]))


class Series:
    """Ordered time series: a strictly increasing index with one value per entry.

    The index is kept as a sorted list; lookups by timestamp use binary search
    and new observations may only be appended after the last timestamp.
    """

    def __init__(
        self,
        index: Optional[Iterable[Any]] = None,
        values: Optional[Iterable[Any]] = None,
    ) -> None:
        self._index: List[Any] = list(index) if index is not None else []
        self._values: List[Any] = list(values) if values is not None else []
        if len(self._index) != len(self._values):
            raise SizeMismatch("The index and the values must be of the same size.")
        if not _is_strictly_increasing(self._index):
            raise OrderViolation("Provided a non-increasing index in a constructor.")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Any]]) -> "Series":
        s = cls()
        for t, v in pairs:
            s.append(t, v)
        return s

    @classmethod
    def from_pandas(cls, data: pd.Series) -> "Series":
        return cls(data.index.tolist(), data.tolist())

    def size(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def append(self, timestamp: Any, value: Any) -> None:
        """Add an observation at the end.

        Raises OrderViolation, leaving the series unchanged, if the timestamp
        is not greater than the last one.
        """
        if self._index and not self._index[-1] < timestamp:
            raise OrderViolation(
                f"Appending timestamp {timestamp!r} not greater than the last index "
                f"element {self._index[-1]!r}."
            )
        self._index.append(timestamp)
        self._values.append(value)

    def _position(self, timestamp: Any) -> int:
        loc = bisect_left(self._index, timestamp)
        if loc == len(self._index) or self._index[loc] != timestamp:
            raise KeyNotFound(timestamp)
        return loc

    def at(self, timestamp: Any) -> Any:
        return self._values[self._position(timestamp)]

    def __getitem__(self, timestamp: Any) -> Any:
        return self.at(timestamp)

    def __contains__(self, timestamp: Any) -> bool:
        loc = bisect_left(self._index, timestamp)
        return loc < len(self._index) and self._index[loc] == timestamp

    def __iter__(self) -> Iterator[Observation]:
        for t, v in zip(self._index, self._values):
            yield Observation(t, v)

    def index_view(self) -> Tuple[Any, ...]:
        return tuple(self._index)

    def values_view(self) -> Tuple[Any, ...]:
        return tuple(self._values)

    def first(self) -> Observation:
        if not self._index:
            raise SizeMismatch("first() of an empty series")
        return Observation(self._index[0], self._values[0])

    def last(self) -> Observation:
        if not self._index:
            raise SizeMismatch("last() of an empty series")
        return Observation(self._index[-1], self._values[-1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return self._index == other._index and self._values == other._values

    def to_string(self, sep: str = ", ") -> str:
        return "".join(f"{t}:{v}{sep}" for t, v in zip(self._index, self._values))

    def to_pandas(self, name: Optional[str] = None) -> pd.Series:
        return pd.Series(self._values, index=self._index, name=name)

    def __repr__(self) -> str:
        return f"Series({self.to_string().rstrip(', ')})"
