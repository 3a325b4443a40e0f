"""Batch front end: factor matrices and row-by-row kernel evaluation.

A factor matrix is a list of ``(T, K, sig, r, b, S)`` rows. It is built either
from a seed contract with one factor swept over a range, or from a batch of
contracts. The ``matrix_*`` functions value every row with a transient
contract of the requested type and return results in row order.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

import numpy as np
import pandas as pd

from .contract import FACTOR_ROW_INDEX, FactorRow, OptionContract, OptionFactors
from .enums import ExerciseType, Factor, Greek, OptionType
from .exceptions import ConfigurationError
from .utils import log_timing
from .validation import (
    canonicalize_exercise_type,
    canonicalize_factor,
    canonicalize_option_type,
)
from .valuation.core import OptionValuation
from .valuation.params import SweepParams
from .valuation.sweeps import sweep_points

__all__ = [
    "MATRIX_COLUMNS",
    "generate_matrix",
    "generate_batch_matrix",
    "matrix_price",
    "matrix_delta",
    "matrix_gamma",
    "matrix_to_frame",
    "matrix_frame",
]

logger = logging.getLogger(__name__)

MATRIX_COLUMNS = tuple(factor.value for factor in Factor)


def _factors_of(source: OptionContract | OptionFactors) -> OptionFactors:
    if isinstance(source, OptionContract):
        return source.factors
    if isinstance(source, OptionFactors):
        return source
    raise ConfigurationError(
        f"expected OptionContract or OptionFactors, got {type(source).__name__}"
    )


def generate_matrix(
    seed: OptionContract | OptionFactors,
    factor: Factor | str,
    start: float,
    end: float,
    step: float,
) -> list[FactorRow]:
    """Rows of the seed's factors with one factor swept from start to end.

    Factor name and step are validated as for a sweep; the range itself is
    not, so rows may hold values a contract would reject.
    """
    factor = canonicalize_factor(factor)
    base = list(_factors_of(seed).as_tuple())
    column = FACTOR_ROW_INDEX[factor]

    matrix = []
    for value in sweep_points(start, end, step):
        row = base.copy()
        row[column] = value
        matrix.append(tuple(row))
    logger.debug("Generated %d rows sweeping %s", len(matrix), factor.value)
    return matrix


def generate_batch_matrix(
    contracts: Iterable[OptionContract | OptionFactors],
) -> list[FactorRow]:
    """One row per contract, in input order."""
    return [_factors_of(contract).as_tuple() for contract in contracts]


def _evaluate_rows(
    matrix: Sequence[Sequence[float]],
    greek: Greek,
    option_type: OptionType | str,
    exercise_type: ExerciseType | str,
    params: SweepParams | None,
) -> np.ndarray:
    option_type = canonicalize_option_type(option_type)
    exercise_type = canonicalize_exercise_type(exercise_type)
    params = SweepParams() if params is None else params

    results = []
    with log_timing(logger, f"matrix {greek.value}", params.log_timings):
        for row in matrix:
            contract = OptionContract(
                OptionFactors.from_row(tuple(row)),
                option_type,
                exercise_type=exercise_type,
            )
            valuation = OptionValuation(contract)
            results.append(getattr(valuation, greek.value)())
    logger.debug(
        "Valued %d rows: %s %s (%s)",
        len(results),
        exercise_type.value,
        greek.value,
        option_type.value,
    )
    return np.asarray(results, dtype=float)


def matrix_price(
    matrix: Sequence[Sequence[float]],
    option_type: OptionType | str = OptionType.CALL,
    exercise_type: ExerciseType | str = ExerciseType.EUROPEAN,
    *,
    params: SweepParams | None = None,
) -> np.ndarray:
    """Price every row; perpetual American rows ignore the T column."""
    return _evaluate_rows(matrix, Greek.PRICE, option_type, exercise_type, params)


def matrix_delta(
    matrix: Sequence[Sequence[float]],
    option_type: OptionType | str = OptionType.CALL,
    *,
    params: SweepParams | None = None,
) -> np.ndarray:
    """European delta of every row."""
    return _evaluate_rows(matrix, Greek.DELTA, option_type, ExerciseType.EUROPEAN, params)


def matrix_gamma(
    matrix: Sequence[Sequence[float]],
    option_type: OptionType | str = OptionType.CALL,
    *,
    params: SweepParams | None = None,
) -> np.ndarray:
    """European gamma of every row (the same for calls and puts)."""
    return _evaluate_rows(matrix, Greek.GAMMA, option_type, ExerciseType.EUROPEAN, params)


def matrix_to_frame(matrix: Sequence[Sequence[float]]) -> pd.DataFrame:
    """Tabulate a factor matrix with columns T, K, SIG, R, B, S."""
    return pd.DataFrame(list(matrix), columns=list(MATRIX_COLUMNS), dtype=float)


def matrix_frame(
    matrix: Sequence[Sequence[float]],
    option_type: OptionType | str = OptionType.CALL,
    exercise_type: ExerciseType | str = ExerciseType.EUROPEAN,
    greeks: Sequence[Greek | str] = (Greek.PRICE,),
) -> pd.DataFrame:
    """Factor matrix plus one result column per requested greek."""
    frame = matrix_to_frame(matrix)
    for greek in greeks:
        if isinstance(greek, str):
            try:
                greek = Greek(greek.lower())
            except ValueError as exc:
                raise ConfigurationError(f"Unknown greek: {greek!r}") from exc
        frame[greek.value] = _evaluate_rows(matrix, greek, option_type, exercise_type, None)
    return frame
