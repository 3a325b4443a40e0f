"""Single-factor override and sweep engines shared by every kernel.

A kernel is any callable ``(T, K, sig, r, b, S) -> float``. There is exactly
one override routine and one sweep routine; the price, delta and gamma queries
of both option families pass their kernel in as a value.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

import numpy as np

from ..contract import FACTOR_ROW_INDEX, OptionFactors
from ..enums import Factor
from ..exceptions import InvalidStepDirection
from ..utils import log_timing
from ..validation import canonicalize_factor, validate_step, validate_sweep_range
from .params import SweepParams

__all__ = [
    "Kernel",
    "sweep_points",
    "evaluate_override",
    "evaluate_sweep",
]

logger = logging.getLogger(__name__)

Kernel = Callable[[float, float, float, float, float, float], float]


def _direction(start: float, end: float, step: float) -> float:
    if end > start:
        return 1.0
    if end < start:
        return -1.0
    # Degenerate range: a single point, walked in the direction of the step.
    return 1.0 if step > 0 else -1.0


def _accumulate(start: float, end: float, step: float) -> list[float]:
    """Walk from start towards end by repeated addition of step.

    Points are accumulated rather than computed from an index, so the last
    point follows floating-point accumulation (it may land a hair past end).
    """
    direction = _direction(start, end, step)
    points = []
    value = start
    while (value - end) * direction <= 0:
        points.append(value)
        next_value = value + step
        # Step below the float spacing at value: the walk would never advance.
        if next_value == value:
            raise InvalidStepDirection(step, start, end)
        value = next_value
    return points


def sweep_points(start: float, end: float, step: float) -> list[float]:
    """Factor values visited by a sweep from start to end, in order."""
    validate_step(start, end, step)
    return _accumulate(start, end, step)


def evaluate_override(
    kernel: Kernel,
    factors: OptionFactors,
    factor: Factor | str,
    value: float,
) -> float:
    """Evaluate kernel with one factor replaced; ``factors`` is left unchanged.

    Raises
    ------
    InvalidFactorName
        ``factor`` is not one of T, K, SIG, R, B, S.
    InvalidFactorValue
        The record with the replaced factor breaks a bound.
    """
    factor = canonicalize_factor(factor)
    effective = factors.replace_factor(factor, value)
    logger.debug("Override %s=%s via %s", factor.value, value, getattr(kernel, "__name__", kernel))
    return kernel(*effective.as_tuple())


def evaluate_sweep(
    kernel: Kernel,
    factors: OptionFactors,
    factor: Factor | str,
    start: float,
    end: float,
    step: float,
    *,
    params: SweepParams | None = None,
) -> np.ndarray:
    """Evaluate kernel while one factor sweeps from start to end.

    Returns
    -------
    np.ndarray
        One result per swept value, in sweep order.

    Raises
    ------
    InvalidFactorName
        ``factor`` is not one of T, K, SIG, R, B, S.
    InvalidStepDirection
        ``step`` is zero or does not point from start to end.
    InvalidFactorValue
        An endpoint is negative or non-finite, or K is swept from/to zero.
    """
    factor = canonicalize_factor(factor)
    validate_step(start, end, step)
    validate_sweep_range(factor, start, end)
    params = SweepParams() if params is None else params

    row = list(factors.as_tuple())
    column = FACTOR_ROW_INDEX[factor]
    points = _accumulate(start, end, step)
    logger.debug(
        "Sweep %s from %s to %s step %s: %d points via %s",
        factor.value,
        start,
        end,
        step,
        len(points),
        getattr(kernel, "__name__", kernel),
    )

    results = []
    with log_timing(logger, f"sweep {factor.value}", params.log_timings):
        for value in points:
            row[column] = value
            results.append(kernel(*row))
    return np.asarray(results, dtype=float)
