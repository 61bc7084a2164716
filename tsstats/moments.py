"""Moments of series and plain sequences.

Each function runs the matching online filter over the input and raises
SizeMismatch when the filter is not ready, i.e. the input is too small or has
too many missing values. A ready filter may still produce NaN, for example
the correlation of a constant series.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Type, Union

from .apply import aggregate_and_apply, apply_values
from .core.aggregators import Aggregator, Sum
from .core.series import Series
from .exceptions import SizeMismatch
from .filters.online_moments import (
    OnlineCovKnownMeans,
    OnlineCovUnknownMeans,
    OnlineMean,
    OnlineVarKnownMean,
    OnlineVarUnknownMean,
)


logger = logging.getLogger(__name__)

Values = Union[Series, Iterable[Any]]


def _check_ready(est: Any, name: str) -> None:
    if not est.ready():
        logger.debug("%s(): not ready after %d observations", name, est.n_processed())
        raise SizeMismatch(f"{name}(): input too small or too many missing values.")


def mean(values: Values, skipna: bool = True) -> float:
    est = apply_values(values, OnlineMean(), skipna=skipna)
    _check_ready(est, "mean")
    return est.value()


def var(values: Values, mean: Optional[float] = None, skipna: bool = True) -> float:
    """Variance using a one-pass algorithm.

    With ``mean`` given the squared deviations are averaged over n, otherwise
    the mean is estimated and the result is Bessel-corrected.
    """
    est: Union[OnlineVarKnownMean, OnlineVarUnknownMean]
    if mean is None:
        est = OnlineVarUnknownMean()
    else:
        est = OnlineVarKnownMean(mean)
    apply_values(values, est, skipna=skipna)
    _check_ready(est, "var")
    return est.value()


def apply_cov(
    x: Series,
    y: Series,
    x_mean: Optional[float] = None,
    y_mean: Optional[float] = None,
    aggregator: Type[Aggregator] = Sum,
    skipna: bool = True,
) -> Union[OnlineCovKnownMeans, OnlineCovUnknownMeans]:
    """Align two series and return the covariance filter fed with them.

    Means are estimated unless both ``x_mean`` and ``y_mean`` are given. With
    ``skipna`` aligned pairs holding an NA are not fed to the filter.
    """
    if (x_mean is None) != (y_mean is None):
        raise ValueError("x_mean and y_mean must be given together")
    est: Union[OnlineCovKnownMeans, OnlineCovUnknownMeans]
    if x_mean is None:
        est = OnlineCovUnknownMeans()
    else:
        est = OnlineCovKnownMeans(x_mean, y_mean)  # type: ignore[arg-type]
    return aggregate_and_apply(est, x, y, aggregator=aggregator, skipna=skipna)


def cov(
    x: Series,
    y: Series,
    x_mean: Optional[float] = None,
    y_mean: Optional[float] = None,
    aggregator: Type[Aggregator] = Sum,
    skipna: bool = True,
) -> float:
    est = apply_cov(x, y, x_mean, y_mean, aggregator=aggregator, skipna=skipna)
    _check_ready(est, "cov")
    return est.cov()


def corr(
    x: Series,
    y: Series,
    x_mean: Optional[float] = None,
    y_mean: Optional[float] = None,
    aggregator: Type[Aggregator] = Sum,
    skipna: bool = True,
) -> float:
    est = apply_cov(x, y, x_mean, y_mean, aggregator=aggregator, skipna=skipna)
    _check_ready(est, "corr")
    return est.corr()
