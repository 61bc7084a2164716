from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from tsstats.accumulator import Accumulator
from tsstats.apply import apply_pairs
from tsstats.config import AppConfig, load_config
from tsstats.core.aggregators import get_aggregator
from tsstats.core.sequence import AutoIndex, sequence
from tsstats.core.series import Series
from tsstats.exceptions import SizeMismatch
from tsstats.filters import RollingMean, RollingMedian
from tsstats.moments import corr, cov, mean, var
from tsstats.utils.logging import setup_logging
from tsstats.utils.printing import format_series


app = typer.Typer(add_completion=False)
logger = logging.getLogger("tsstats.cli")


def _setup(config_path: Optional[Path]) -> AppConfig:
    cfg = load_config(config_path)
    setup_logging(cfg.env.LOG_LEVEL, cfg.env.LOG_FORMAT)
    return cfg


@app.command()
def rolling(
    size: int = typer.Option(10, help="Length of the generated sequence 1, 2, ..."),
    window: Optional[int] = typer.Option(None, help="Window size (defaults to config)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with runtime settings"),
) -> None:
    """Rolling mean and median of a generated sequence."""
    cfg = _setup(config)
    rc = cfg.runtime.rolling
    w = window if window is not None else rc.window_size
    s = AutoIndex(1).zip_values(sequence(size, 1.0, 1.0))

    outputs = []
    for flt in (RollingMean(w), RollingMedian(w)):
        acc = Accumulator(flt, skip_na_input=rc.skip_na_input, skip_na_output=rc.skip_na_output)
        outputs.append(apply_pairs(s, acc).value())
    logger.info("rolling filters applied", extra={"window": w, "size": size})
    typer.echo(format_series(s, *outputs, settings=cfg.runtime.printing))


@app.command()
def moments(
    values: List[float] = typer.Argument(..., help="Values; use 'nan' for missing ones"),
    keep_na: bool = typer.Option(False, "--keep-na", help="Fold NA values into the estimates"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with runtime settings"),
) -> None:
    """Mean and variance of the given values."""
    _setup(config)
    skipna = not keep_na
    for name, func in (("mean", mean), ("var", var)):
        try:
            typer.echo(f"{name} = {func(values, skipna=skipna)}")
        except SizeMismatch as exc:
            typer.echo(f"{name}: {exc}", err=True)


@app.command("cov")
def cov_demo(
    aggregator: Optional[str] = typer.Option(None, help="sum | first | last (defaults to config)"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file with runtime settings"),
) -> None:
    """Covariance and correlation of two series with shared timestamps."""
    cfg = _setup(config)
    agg = get_aggregator(aggregator or cfg.runtime.alignment.aggregator)
    skipna = cfg.runtime.alignment.skipna
    x = Series([0, 1, 2, 4], [0.0, 0.5, 0.5, 1.0])
    y = Series([0, 2, 4], [0.0, 1.0, 1.0])
    typer.echo(format_series(x, y, settings=cfg.runtime.printing))
    typer.echo(f"cov(x,y)      = {cov(x, y, aggregator=agg, skipna=skipna)} (means estimated)")
    typer.echo(f"cov(x,y,0,0)  = {cov(x, y, 0.0, 0.0, aggregator=agg, skipna=skipna)} (means 0)")
    typer.echo(f"corr(x,y)     = {corr(x, y, aggregator=agg, skipna=skipna)}")
    typer.echo(f"corr(x,y,0,0) = {corr(x, y, 0.0, 0.0, aggregator=agg, skipna=skipna)}")


@app.command()
def merge(config: Optional[Path] = typer.Option(None, "--config", help="YAML file with runtime settings")) -> None:
    """Print several auto-indexed series on their merged index."""
    cfg = _setup(config)
    x = AutoIndex(-1).zip_values(sequence(5, 1, 1))
    y = AutoIndex(3).zip_values(sequence(3, 1, 1))
    z = AutoIndex(2).zip_values(sequence(6, 6, 1))
    typer.echo(format_series(x, y, z, settings=cfg.runtime.printing))


if __name__ == "__main__":
    app()
