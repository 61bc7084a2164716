"""Core primitives: NA policy, buffers, series, aggregators and merging."""

from .aggregators import AGGREGATORS, Aggregator, First, Last, Sum, get_aggregator
from .buffers import CircularBuffer
from .merge import MergeCursor, MergeIterator, SeriesCollection
from .na import NaGuard, NaPolicy, guarded, is_na, na_value, supports_na
from .sequence import AutoIndex, Sequence, sequence
from .series import Observation, Series

__all__ = [
    "AGGREGATORS",
    "Aggregator",
    "AutoIndex",
    "CircularBuffer",
    "First",
    "Last",
    "MergeCursor",
    "MergeIterator",
    "NaGuard",
    "NaPolicy",
    "Observation",
    "Sequence",
    "Series",
    "SeriesCollection",
    "Sum",
    "get_aggregator",
    "guarded",
    "is_na",
    "na_value",
    "sequence",
    "supports_na",
]
