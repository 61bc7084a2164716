from __future__ import annotations

from typing import Any


class TsError(Exception):
    """Base class for all errors raised by tsstats."""


class SizeMismatch(TsError, ValueError):
    """Sizes do not match, or too few valid observations for a statistic."""


class OrderViolation(TsError, ValueError):
    """An index is not strictly increasing."""


class KeyNotFound(TsError, KeyError):
    """Point lookup for a timestamp that is not in the index."""

    def __init__(self, timestamp: Any) -> None:
        super().__init__(timestamp)
        self.timestamp = timestamp

    def __str__(self) -> str:
        return f"Index {self.timestamp!r} not found."


class UnsupportedOperation(TsError, TypeError):
    """NA query on a value kind without an NA representation."""

    def __init__(self, kind: Any) -> None:
        name = getattr(kind, "__name__", repr(kind))
        super().__init__(f"No support for NA values for type {name}")
        self.kind = kind


class InternalInvariantViolation(TsError, RuntimeError):
    """Internal state of a filter is inconsistent."""


class ContractViolation(TsError, ValueError):
    """Invalid construction argument, e.g. a window that is too small."""
