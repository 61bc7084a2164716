from __future__ import annotations

import copy
import math

import numpy as np
import pytest

from tsstats.filters import (
    OnlineCovKnownMeans,
    OnlineCovUnknownMeans,
    OnlineMean,
    OnlineVarKnownMean,
    OnlineVarUnknownMean,
)


def feed(flt, values):  # noqa: ANN001, ANN201
    for v in values:
        flt.update(v)
    return flt


def feed2(flt, xs, ys):  # noqa: ANN001, ANN201
    for a, b in zip(xs, ys):
        flt.update(a, b)
    return flt


def test_mean_readiness() -> None:
    m = OnlineMean()
    assert not m.ready()
    assert math.isnan(m.value())
    m.update(2.0)
    assert m.ready()
    assert m.value() == 2.0
    m.update(4.0)
    assert m.value() == 3.0
    assert m.n_processed() == 2


def test_var_unknown_mean() -> None:
    v = OnlineVarUnknownMean()
    v.update(1.0)
    assert not v.ready()
    assert math.isnan(v.value())
    feed(v, [2.0, 3.0, 4.0])
    assert v.ready()
    assert v.value() == pytest.approx(np.var([1, 2, 3, 4], ddof=1))
    assert v.mean() == pytest.approx(2.5)


def test_var_known_mean() -> None:
    v = OnlineVarKnownMean(0.0)
    assert not v.ready()
    v.update(2.0)
    assert v.ready()
    assert v.value() == 4.0
    v.update(-4.0)
    assert v.value() == pytest.approx(10.0)
    assert v.mean() == 0.0


def test_large_offset_is_numerically_stable() -> None:
    rng = np.random.default_rng(42)
    values = 1e8 + rng.uniform(0.0, 1.0, size=1000)
    m = feed(OnlineMean(), values)
    v = feed(OnlineVarUnknownMean(), values)
    expected_mean = float(np.mean(values))
    expected_var = float(np.var(values, ddof=1))
    assert m.value() == pytest.approx(expected_mean, rel=1e-6)
    assert v.value() == pytest.approx(expected_var, rel=1e-6)


def test_cov_unknown_means_matches_numpy() -> None:
    rng = np.random.default_rng(7)
    xs = rng.normal(size=50)
    ys = 0.5 * xs + rng.normal(size=50)
    c = feed2(OnlineCovUnknownMeans(), xs, ys)
    ref = np.cov(xs, ys, ddof=1)
    assert c.cov() == pytest.approx(ref[0, 1])
    assert c.var1() == pytest.approx(ref[0, 0])
    assert c.var2() == pytest.approx(ref[1, 1])
    assert c.corr() == pytest.approx(np.corrcoef(xs, ys)[0, 1])
    assert c.corr() == pytest.approx(c.cov() / math.sqrt(c.var1() * c.var2()))
    assert c.mean1() == pytest.approx(np.mean(xs))
    assert c.value() == c.cov()


def test_cov_unknown_means_readiness() -> None:
    c = OnlineCovUnknownMeans()
    c.update(1.0, 2.0)
    assert not c.ready()
    assert math.isnan(c.cov())
    assert math.isnan(c.corr())
    c.update(2.0, 3.0)
    assert c.ready()


def test_cov_known_means() -> None:
    c = feed2(OnlineCovKnownMeans(0.0, 1.0), [1.0, 2.0, -1.0], [2.0, 0.0, 1.0])
    # deviations: (1, 1), (2, -1), (-1, 0)
    assert c.ready()
    assert c.cov() == pytest.approx((1 - 2 + 0) / 3)
    assert c.var1() == pytest.approx((1 + 4 + 1) / 3)
    assert c.var2() == pytest.approx((1 + 1 + 0) / 3)
    assert c.corr() == pytest.approx(-1 / math.sqrt(6 * 2))
    assert c.corr() == pytest.approx(c.cov() / math.sqrt(c.var1() * c.var2()))


def test_corr_of_constant_input_is_nan() -> None:
    c = feed2(OnlineCovUnknownMeans(), [1.0, 1.0, 1.0], [1.0, 2.0, 3.0])
    assert c.ready()
    assert c.var1() == 0.0
    assert math.isnan(c.corr())
    k = feed2(OnlineCovKnownMeans(1.0, 0.0), [1.0, 1.0], [1.0, 2.0])
    assert math.isnan(k.corr())


def test_na_poisons_state_but_not_readiness() -> None:
    m = feed(OnlineMean(), [0.0, 1.0, math.nan, 1.0])
    assert m.ready()
    assert math.isnan(m.value())
    v = feed(OnlineVarUnknownMean(), [math.nan, 1.0])
    assert v.ready()
    assert math.isnan(v.value())


def test_filters_copy_independently() -> None:
    m = feed(OnlineMean(), [1.0, 3.0])
    m2 = copy.copy(m)
    m2.update(5.0)
    assert m.value() == 2.0
    assert m2.value() == 3.0
