"""Driving filters from values, series and pairs of aligned series."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Type, TypeVar, Union

from .core.aggregators import Aggregator, Sum
from .core.merge import MergeCursor
from .core.na import guarded
from .core.series import Series


logger = logging.getLogger(__name__)

F = TypeVar("F")


def _values(container: Union[Series, Iterable[Any]]) -> Iterable[Any]:
    if isinstance(container, Series):
        return container.values_view()
    return container


def apply_values(
    container: Union[Series, Iterable[Any]],
    flt: F,
    skipna: bool = True,
    kind: Type[Any] = float,
) -> F:
    """Feed the values of a series or an iterable to ``flt.update``.

    With ``skipna`` NA values are not passed on. Returns the filter.
    """
    update = guarded(flt.update, enabled=skipna, kind=kind)  # type: ignore[attr-defined]
    for v in _values(container):
        update(v)
    return flt


def apply_pairs(series: Series, consumer: F, skipna: bool = False, kind: Type[Any] = float) -> F:
    """Call ``consumer.update(timestamp, value)`` for every observation."""
    update = guarded(consumer.update, enabled=skipna, kind=kind)  # type: ignore[attr-defined]
    for t, v in series:
        update.call_pair(t, v)
    return consumer


def aggregate_and_apply(
    flt: F,
    x: Series,
    y: Series,
    aggregator: Type[Aggregator] = Sum,
    skipna: bool = True,
) -> F:
    """Apply a bivariate filter on values aggregated between shared timestamps.

    Values of both series are folded into one aggregator per side until the
    cursors meet on the same timestamp. The aggregates are then passed to
    ``flt.update`` (skipped if either one is NA), the aggregators are reset
    and both series advance. Stops when either series is exhausted, so
    trailing unmatched observations never reach the filter.
    """
    cx, cy = MergeCursor(x), MergeCursor(y)
    if cx.at_end() or cy.at_end():
        logger.debug("aggregate_and_apply: empty input, filter not updated")
        return flt

    update = guarded(flt.update, enabled=skipna)  # type: ignore[attr-defined]
    aggx, aggy = aggregator(), aggregator()
    aggx(cx.value())
    aggy(cy.value())
    groups = 0

    while not cx.at_end() and not cy.at_end():
        tx, ty = cx.timestamp(), cy.timestamp()
        if tx < ty:
            cx.advance()
            if not cx.at_end():
                aggx(cx.value())
        elif ty < tx:
            cy.advance()
            if not cy.at_end():
                aggy(cy.value())
        else:
            update(aggx.value(), aggy.value())
            groups += 1
            aggx, aggy = aggregator(), aggregator()
            cx.advance()
            cy.advance()
            if not cx.at_end():
                aggx(cx.value())
            if not cy.at_end():
                aggy(cy.value())

    logger.debug(
        "aggregate_and_apply: %d shared timestamps (%s aggregation)", groups, aggregator.name
    )
    return flt
