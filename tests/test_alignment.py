from __future__ import annotations

import math
from typing import List, Tuple

import pytest

from tsstats.apply import aggregate_and_apply
from tsstats.core.aggregators import First, Last, Sum, get_aggregator
from tsstats.core.series import Series
from tsstats.moments import apply_cov, corr, cov


NAN = math.nan


class Recorder:
    def __init__(self) -> None:
        self.pairs: List[Tuple[float, float]] = []

    def update(self, a: float, b: float) -> None:
        self.pairs.append((a, b))


def worked_example() -> Tuple[Series, Series]:
    x = Series([0, 1, 2, 4], [0.0, 0.5, 0.5, 1.0])
    y = Series([0, 2, 4], [0.0, 1.0, 1.0])
    return x, y


def test_aligned_pairs_with_sum() -> None:
    x, y = worked_example()
    rec = aggregate_and_apply(Recorder(), x, y, aggregator=Sum)
    assert rec.pairs == [(0.0, 0.0), (1.0, 1.0), (1.0, 1.0)]


def test_worked_example_covariance() -> None:
    x, y = worked_example()
    assert cov(x, y) == pytest.approx(1.0 / 3.0)
    assert cov(x, y, 0.0, 0.0) == pytest.approx(2.0 / 3.0)
    est = apply_cov(x, y)
    assert est.n_processed() == 3
    assert est.var1() == pytest.approx(1.0 / 3.0)
    assert corr(x, y) == pytest.approx(est.cov() / math.sqrt(est.var1() * est.var2()))
    assert corr(x, y) == pytest.approx(1.0)
    assert corr(x, y, 0.0, 0.0) == pytest.approx(1.0)


def test_lagging_run_is_aggregated() -> None:
    x = Series([0, 1, 2, 3], [1.0, 2.0, 3.0, 4.0])
    y = Series([3], [5.0])
    assert aggregate_and_apply(Recorder(), x, y, Sum).pairs == [(10.0, 5.0)]
    assert aggregate_and_apply(Recorder(), x, y, First).pairs == [(1.0, 5.0)]
    assert aggregate_and_apply(Recorder(), x, y, Last).pairs == [(4.0, 5.0)]


def test_aggregators_ignore_na() -> None:
    x = Series([1, 2, 3], [1.0, NAN, 2.0])
    y = Series([3], [1.0])
    assert cov(x, y, 0.0, 0.0, aggregator=Sum) == pytest.approx(3.0)
    assert cov(x, y, 0.0, 0.0, aggregator=Last) == pytest.approx(2.0)
    assert cov(x, y, 0.0, 0.0, aggregator=First) == pytest.approx(1.0)


def test_correlation_with_aggregations() -> None:
    x = Series([0, 1, 2], [-1.0, 0.1, 0.9])
    y = Series([0, 2], [1.0, -1.0])
    assert corr(x, y, aggregator=Sum) == pytest.approx(-1.0)
    assert corr(x, y, aggregator=Last) == pytest.approx(-1.0)
    assert corr(x, y, 0.0, 0.0, aggregator=Sum) == pytest.approx(-1.0)
    assert corr(x, y, 0.0, 0.0, aggregator=Last) == pytest.approx(-1.9 / math.sqrt(3.62))


def test_na_pair_is_skipped() -> None:
    x = Series([0, 1, 2], [NAN, 1.0, 2.0])
    y = Series([0, 1, 2], [1.0, 2.0, 3.0])
    rec = aggregate_and_apply(Recorder(), x, y)
    assert rec.pairs == [(1.0, 2.0), (2.0, 3.0)]
    rec = aggregate_and_apply(Recorder(), x, y, skipna=False)
    assert len(rec.pairs) == 3
    assert math.isnan(rec.pairs[0][0])


def test_unmatched_tail_never_reaches_filter() -> None:
    x = Series([0, 1, 5, 6], [1.0, 1.0, 1.0, 1.0])
    y = Series([1, 3], [2.0, 2.0])
    rec = aggregate_and_apply(Recorder(), x, y)
    assert rec.pairs == [(2.0, 2.0)]


def test_empty_input_leaves_filter_untouched() -> None:
    rec = aggregate_and_apply(Recorder(), Series(), Series([1], [1.0]))
    assert rec.pairs == []
    est = apply_cov(Series([1], [1.0]), Series())
    assert not est.ready()


def test_get_aggregator() -> None:
    assert get_aggregator("SUM") is Sum
    assert get_aggregator("first") is First
    with pytest.raises(ValueError):
        get_aggregator("median")


def test_aggregator_without_valid_value_is_na() -> None:
    agg = First()
    agg(NAN)
    assert math.isnan(agg.value())
    agg(2.0)
    agg(3.0)
    assert agg.value() == 2.0


def test_cov_keeps_na_pair_when_asked() -> None:
    x = Series([0, 1, 2], [0.0, NAN, 1.0])
    y = Series([0, 1, 2], [0.0, 1.0, 1.0])
    assert cov(x, y) == pytest.approx(0.5)
    assert math.isnan(cov(x, y, skipna=False))
    assert math.isnan(corr(x, y, skipna=False))
    assert apply_cov(x, y, skipna=False).n_processed() == 3
