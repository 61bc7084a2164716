from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Type, TypeVar

import numpy as np

from ..exceptions import UnsupportedOperation


F = TypeVar("F", bound=Callable[..., Any])


def supports_na(kind: Type[Any]) -> bool:
    """Does the value kind have an NA (quiet NaN) representation?"""
    try:
        return issubclass(kind, (float, np.floating))
    except TypeError:
        return False


def is_na(value: Any) -> bool:
    """Is the given value NA?

    Raises UnsupportedOperation for kinds which cannot hold NA (ints, bools, ...).
    """
    kind = type(value)
    if not supports_na(kind):
        raise UnsupportedOperation(kind)
    return math.isnan(value)


def na_value(kind: Type[Any] = float) -> Any:
    """Create an NA value for the given floating kind."""
    if not supports_na(kind):
        raise UnsupportedOperation(kind)
    return kind(math.nan)


@dataclass(frozen=True)
class NaPolicy:
    """NA capability of one value kind, resolved once at construction."""

    kind: Type[Any]
    can_na: bool

    @classmethod
    def for_kind(cls, kind: Type[Any] = float) -> "NaPolicy":
        return cls(kind=kind, can_na=supports_na(kind))

    def is_na(self, value: Any) -> bool:
        # values of a kind without NA are never missing
        if not self.can_na:
            return False
        return math.isnan(value)

    def na(self) -> Any:
        return na_value(self.kind)


FLOAT_POLICY = NaPolicy.for_kind(float)


class NaGuard(Generic[F]):
    """Wrapper around a consumer optionally skipping NA arguments.

    With checks disabled, or for a kind without NA, every call is forwarded.
    Otherwise a call is dropped if any of its values is NA:

    - ``guard(v)`` checks ``v``
    - ``guard(v1, v2)`` checks both values (bivariate filters)
    - ``guard.call_pair(t, v)`` checks only ``v``, the timestamp is passed through
    """

    def __init__(self, consumer: F, enabled: bool = True, kind: Type[Any] = float) -> None:
        self.consumer = consumer
        self.enabled = enabled
        self.policy = NaPolicy.for_kind(kind)
        self._check = enabled and self.policy.can_na

    def __call__(self, *values: Any) -> None:
        if self._check and any(self.policy.is_na(v) for v in values):
            return
        self.consumer(*values)

    def call_pair(self, timestamp: Any, value: Any) -> None:
        if self._check and self.policy.is_na(value):
            return
        self.consumer(timestamp, value)


def guarded(consumer: F, enabled: bool = True, kind: Type[Any] = float) -> NaGuard[F]:
    return NaGuard(consumer, enabled=enabled, kind=kind)
