"""Validation policy: guards over factor names, factor values, option types and steps.

Every guard is pure and raises one of the :mod:`option_analytics.exceptions`
validation errors. Higher-level operations call them before any mutation or
result accumulation.
"""

from __future__ import annotations

import numpy as np

from .enums import ExerciseType, Factor, OptionType
from .exceptions import (
    ConfigurationError,
    InvalidFactorName,
    InvalidFactorValue,
    InvalidOptionType,
    InvalidStepDirection,
)

__all__ = [
    "canonicalize_factor",
    "canonicalize_option_type",
    "canonicalize_exercise_type",
    "validate_factor_name",
    "validate_option_type",
    "validate_factor_values",
    "validate_step",
    "validate_sweep_range",
]

_FACTOR_BY_TOKEN = {factor.value: factor for factor in Factor}
_OPTION_TYPE_BY_TOKEN = {option_type.value: option_type for option_type in OptionType}


def canonicalize_factor(token: Factor | str) -> Factor:
    """Map a factor token (any casing) or a ``Factor`` to the ``Factor`` member."""
    if isinstance(token, Factor):
        return token
    if not isinstance(token, str):
        raise InvalidFactorName(token)
    factor = _FACTOR_BY_TOKEN.get(token.upper())
    if factor is None:
        raise InvalidFactorName(token)
    return factor


def canonicalize_option_type(token: OptionType | str) -> OptionType:
    """Map ``"C"``/``"P"`` (any casing) or an ``OptionType`` to the ``OptionType`` member."""
    if isinstance(token, OptionType):
        return token
    if not isinstance(token, str):
        raise InvalidOptionType(token)
    option_type = _OPTION_TYPE_BY_TOKEN.get(token.upper())
    if option_type is None:
        raise InvalidOptionType(token)
    return option_type


def canonicalize_exercise_type(token: ExerciseType | str) -> ExerciseType:
    """Map an exercise family token (any casing) or an ``ExerciseType`` to the member."""
    if isinstance(token, ExerciseType):
        return token
    if not isinstance(token, str):
        raise ConfigurationError(
            f"exercise_type must be ExerciseType enum, got {type(token).__name__}"
        )
    try:
        return ExerciseType(token.lower())
    except ValueError as exc:
        raise ConfigurationError(f"Unknown exercise_type: {token!r}") from exc


def validate_factor_name(token: Factor | str) -> None:
    canonicalize_factor(token)


def validate_option_type(token: OptionType | str) -> None:
    canonicalize_option_type(token)


def validate_factor_values(T: float, K: float, sig: float, r: float, b: float, S: float) -> None:
    """Reject non-finite values, negative factors and a non-positive strike.

    A negative cost of carry ``b`` is rejected as well.
    """
    values = (T, K, sig, r, b, S)
    if not all(np.isfinite(v) for v in values):
        raise InvalidFactorValue()
    if T < 0 or sig < 0 or K <= 0 or r < 0 or b < 0 or S < 0:
        raise InvalidFactorValue()


def validate_step(start: float, end: float, step: float) -> None:
    """Require finite bounds and a non-zero step whose sign matches ``end - start``."""
    if not (np.isfinite(start) and np.isfinite(end) and np.isfinite(step)):
        raise InvalidStepDirection(step, start, end)
    span = end - start
    if step == 0 or (span < 0 and step >= 0) or (span > 0 and step <= 0):
        raise InvalidStepDirection(step, start, end)


def validate_sweep_range(factor: Factor, start: float, end: float) -> None:
    """Reject negative sweep endpoints, and zero endpoints when sweeping the strike."""
    if not (np.isfinite(start) and np.isfinite(end)):
        raise InvalidFactorValue()
    if start < 0 or end < 0:
        raise InvalidFactorValue()
    if factor is Factor.K and (start == 0 or end == 0):
        raise InvalidFactorValue()
