from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np
import pytest

from tsstats.core.na import NaGuard, NaPolicy, guarded, is_na, na_value, supports_na
from tsstats.exceptions import UnsupportedOperation


def test_supports_na() -> None:
    assert supports_na(float)
    assert supports_na(np.float32)
    assert supports_na(np.float64)
    assert not supports_na(int)
    assert not supports_na(bool)
    assert not supports_na(np.int64)
    assert not supports_na(str)


def test_is_na() -> None:
    assert is_na(math.nan)
    assert is_na(np.float32("nan"))
    assert not is_na(1.0)
    with pytest.raises(UnsupportedOperation):
        is_na(1)


def test_na_value() -> None:
    assert math.isnan(na_value())
    v = na_value(np.float32)
    assert isinstance(v, np.float32)
    assert np.isnan(v)
    with pytest.raises(UnsupportedOperation):
        na_value(int)


def test_policy_for_kind_without_na_never_reports_missing() -> None:
    policy = NaPolicy.for_kind(int)
    assert not policy.can_na
    assert not policy.is_na(3)
    with pytest.raises(UnsupportedOperation):
        policy.na()


def test_policy_rejects_non_numeric_values() -> None:
    with pytest.raises(TypeError):
        NaPolicy.for_kind(float).is_na("x")


def test_guard_skips_na_values() -> None:
    seen: List[float] = []
    g = guarded(seen.append)
    for v in (1.0, math.nan, 2.0):
        g(v)
    assert seen == [1.0, 2.0]


def test_guard_disabled_forwards_everything() -> None:
    seen: List[float] = []
    g = guarded(seen.append, enabled=False)
    g(math.nan)
    assert len(seen) == 1 and math.isnan(seen[0])


def test_guard_pairs_and_bivariate() -> None:
    pairs: List[Tuple[float, float]] = []

    def consume(a: float, b: float) -> None:
        pairs.append((a, b))

    g: NaGuard = NaGuard(consume)
    g(1.0, 2.0)
    g(math.nan, 2.0)
    g(1.0, math.nan)
    # timestamp is never checked, only the value
    g.call_pair(math.nan, 5.0)
    g.call_pair(3, math.nan)
    assert len(pairs) == 2
    assert pairs[0] == (1.0, 2.0)
    assert math.isnan(pairs[1][0]) and pairs[1][1] == 5.0


def test_guard_for_int_kind_forwards() -> None:
    seen: List[int] = []
    g = guarded(seen.append, kind=int)
    g(1)
    g(2)
    assert seen == [1, 2]
