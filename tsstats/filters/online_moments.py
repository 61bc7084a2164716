"""Online estimators for the mean, variance and covariance.

All estimators use one pass and constant memory. The updates follow
Welford's method, which avoids the loss of precision a naive sum of squares
suffers on large-magnitude inputs:

- Welford, B. P. (1962). "Note on a method for calculating corrected sums of
  squares and products". Technometrics 4(3):419-420.
- Finch, T. (2009). "Incremental calculation of weighted mean and variance".
  University of Cambridge.
"""

from __future__ import annotations

import math

from .validity import DeterministicallyValidFilter


def second_moment_denominator(n: int, bessel_correction: bool) -> int:
    return n - 1 if bessel_correction else n


def correlation(m12: float, m11: float, m22: float) -> float:
    """M12 / sqrt(M11 * M22); NaN when a variance accumulator is zero."""
    prod = m11 * m22
    if prod <= 0.0:
        return math.nan
    return m12 / math.sqrt(prod)


class OnlineMean(DeterministicallyValidFilter):
    """Running mean, ready after one observation."""

    def __init__(self) -> None:
        super().__init__(1)
        self._mu: float = 0.0

    def update(self, x: float) -> float:
        n = self._inc()
        self._mu += (x - self._mu) / n
        return self._mu

    def value(self) -> float:
        return self._mu if self.ready() else math.nan


class OnlineVarUnknownMean(DeterministicallyValidFilter):
    """Sample variance with the mean estimated from the same data.

    Bessel-corrected, so it needs at least two observations.
    """

    def __init__(self) -> None:
        super().__init__(2)
        self._mu: float = 0.0
        self._m2: float = 0.0

    def update(self, x: float) -> None:
        n = self._inc()
        delta = x - self._mu
        self._mu += delta / n
        self._m2 += delta * (x - self._mu)

    def value(self) -> float:
        if not self.ready():
            return math.nan
        return self._m2 / second_moment_denominator(self.n_processed(), True)

    def mean(self) -> float:
        return self._mu


class OnlineVarKnownMean(DeterministicallyValidFilter):
    """Variance around a mean fixed at construction (no Bessel correction)."""

    def __init__(self, mu: float) -> None:
        super().__init__(1)
        self._mu = mu
        self._m2: float = 0.0

    def update(self, x: float) -> None:
        self._inc()
        delta = x - self._mu
        self._m2 += delta * delta

    def value(self) -> float:
        if not self.ready():
            return math.nan
        return self._m2 / second_moment_denominator(self.n_processed(), False)

    def mean(self) -> float:
        return self._mu


class _OnlineCov(DeterministicallyValidFilter):
    _bessel: bool = False

    def __init__(self, required_input_size: int) -> None:
        super().__init__(required_input_size)
        self._m11: float = 0.0
        self._m22: float = 0.0
        self._m12: float = 0.0

    def _moment(self, m: float) -> float:
        if not self.ready():
            return math.nan
        return m / second_moment_denominator(self.n_processed(), self._bessel)

    def cov(self) -> float:
        return self._moment(self._m12)

    def var1(self) -> float:
        return self._moment(self._m11)

    def var2(self) -> float:
        return self._moment(self._m22)

    def corr(self) -> float:
        if not self.ready():
            return math.nan
        return correlation(self._m12, self._m11, self._m22)

    def value(self) -> float:
        return self.cov()


class OnlineCovUnknownMeans(_OnlineCov):
    """Covariance of two sequences with estimated means.

    A direct extension of Welford's update; needs two observations.
    """

    _bessel = True

    def __init__(self) -> None:
        super().__init__(2)
        self._mu1: float = 0.0
        self._mu2: float = 0.0

    def update(self, x1: float, x2: float) -> None:
        n = self._inc()
        delta1 = x1 - self._mu1
        delta2 = x2 - self._mu2
        self._mu1 += delta1 / n
        self._m11 += delta1 * (x1 - self._mu1)
        self._mu2 += delta2 / n
        self._m22 += delta2 * (x2 - self._mu2)
        # post-update deviation of x1 times the pre-update delta of x2
        self._m12 += (x1 - self._mu1) * delta2

    def mean1(self) -> float:
        return self._mu1

    def mean2(self) -> float:
        return self._mu2


class OnlineCovKnownMeans(_OnlineCov):
    """Covariance of two sequences around means fixed at construction."""

    def __init__(self, mu1: float, mu2: float) -> None:
        super().__init__(1)
        self._mu1 = mu1
        self._mu2 = mu2

    def update(self, x1: float, x2: float) -> None:
        self._inc()
        delta1 = x1 - self._mu1
        delta2 = x2 - self._mu2
        self._m11 += delta1 * delta1
        self._m22 += delta2 * delta2
        self._m12 += delta1 * delta2

    def mean1(self) -> float:
        return self._mu1

    def mean2(self) -> float:
        return self._mu2
