"""Streaming filters: online moments and fixed-window rolling estimators.

Every filter exposes ``update`` (consume one observation, or one pair for the
bivariate filters), ``value`` (current estimate, NA until ready) and
``ready``.
"""

from .online_moments import (
    OnlineCovKnownMeans,
    OnlineCovUnknownMeans,
    OnlineMean,
    OnlineVarKnownMean,
    OnlineVarUnknownMean,
)
from .rolling_mean import RollingMean
from .rolling_median import RollingMedian

__all__ = [
    "OnlineCovKnownMeans",
    "OnlineCovUnknownMeans",
    "OnlineMean",
    "OnlineVarKnownMean",
    "OnlineVarUnknownMean",
    "RollingMean",
    "RollingMedian",
]
