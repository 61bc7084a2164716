from __future__ import annotations

from typing import Generic, List, Optional, TypeVar


T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Fixed-capacity ring buffer. New values overwrite the oldest ones.

    Slots are addressed by their position in the underlying storage, which
    lets other structures keep references to values as plain integers.
    """

    def __init__(self, capacity: int) -> None:
        self._capacity: int = capacity
        self._buffer: List[Optional[T]] = [None] * capacity
        self._pos: int = 0
        self._full: bool = False

    def size(self) -> int:
        """Number of valid elements."""
        return self._capacity if self._full else self._pos

    def __len__(self) -> int:
        return self.size()

    def capacity(self) -> int:
        return self._capacity

    def pos(self) -> int:
        """The slot the next write goes to."""
        return self._pos

    def full(self) -> bool:
        return self._full

    def __getitem__(self, slot: int) -> T:
        return self._buffer[slot]  # type: ignore[return-value]

    def write(self, item: T) -> Optional[T]:
        """Write a new value and return the one it replaced (None while filling)."""
        old = self._buffer[self._pos] if self._full else None
        self._buffer[self._pos] = item
        self._pos = (self._pos + 1) % self._capacity
        self._full = self._full or self._pos == 0
        return old

    def snapshot(self) -> List[T]:
        """Valid values from the oldest to the newest."""
        if not self._full:
            return list(self._buffer[: self._pos])  # type: ignore[arg-type]
        return list(self._buffer[self._pos:] + self._buffer[: self._pos])  # type: ignore[operator]
