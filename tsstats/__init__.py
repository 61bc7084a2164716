"""Streaming statistics over time-stamped numeric series.

Online mean/variance/covariance, rolling mean and median, and alignment of
independently time-stamped series on shared timestamps. Observations are
processed once, in timestamp order, with NaN marking missing values.
"""

from .accumulator import Accumulator, accumulate, rolling_mean, rolling_median
from .apply import aggregate_and_apply, apply_pairs, apply_values
from .core import (
    AutoIndex,
    First,
    Last,
    MergeIterator,
    Observation,
    Sequence,
    Series,
    SeriesCollection,
    Sum,
    sequence,
)
from .moments import apply_cov, corr, cov, mean, var

__all__ = [
    "Accumulator",
    "AutoIndex",
    "First",
    "Last",
    "MergeIterator",
    "Observation",
    "Sequence",
    "Series",
    "SeriesCollection",
    "Sum",
    "accumulate",
    "aggregate_and_apply",
    "apply_cov",
    "apply_pairs",
    "apply_values",
    "corr",
    "cov",
    "mean",
    "rolling_mean",
    "rolling_median",
    "sequence",
    "var",
]

__version__ = "0.1.0"
