from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Sequence, TextIO

import pandas as pd

from ..config import PrintSettings
from ..core.merge import MergeIterator
from ..core.series import Series


def _cell(value: Any, width: int, precision: int) -> str:
    if isinstance(value, float):
        text = f"{value:.{precision}f}"
    else:
        text = str(value)
    return text.rjust(width)


def format_series(*series: Series, settings: Optional[PrintSettings] = None) -> str:
    """Render series as aligned columns over their merged index.

    One row per distinct timestamp; cells of series without an observation at
    that timestamp are left blank.
    """
    st = settings or PrintSettings()
    n = len(series)
    lines: List[str] = []

    header = "ix".rjust(st.index_width) + st.index_value_sep
    header += "".join(str(i).rjust(st.values_width) for i in range(n))
    lines.append(header)
    lines.append("-" * st.line_width(n))

    def row(ts: Any, vals: Dict[int, Any]) -> str:
        text = _cell(ts, st.index_width, st.precision) + st.index_value_sep
        for i in range(n):
            text += _cell(vals[i], st.values_width, st.precision) if i in vals else " " * st.values_width
        return text

    merged = MergeIterator.from_series(series)
    cur_ts: Any = None
    vals: Dict[int, Any] = {}
    for i, ts, v in merged:
        if vals and ts != cur_ts:
            lines.append(row(cur_ts, vals))
            vals = {}
        cur_ts = ts
        vals[i] = v
    if vals:
        lines.append(row(cur_ts, vals))
    return "\n".join(lines)


def print_series(
    *series: Series,
    settings: Optional[PrintSettings] = None,
    file: Optional[TextIO] = None,
) -> None:
    out = file if file is not None else sys.stdout
    out.write(format_series(*series, settings=settings) + "\n")


def to_frame(*series: Series, names: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Outer-join series on their timestamps into a DataFrame (missing cells NaN)."""
    labels = list(names) if names is not None else [str(i) for i in range(len(series))]
    if len(labels) != len(series):
        raise ValueError("one name per series expected")
    if not series:
        return pd.DataFrame()
    return pd.concat(
        [s.to_pandas(name=label) for s, label in zip(series, labels)], axis=1, join="outer"
    ).sort_index()
