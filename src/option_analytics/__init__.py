from .enums import ExerciseType, Factor, Greek, OptionType
from .exceptions import (
    OptionAnalyticsError,
    ValidationError,
    InvalidFactorName,
    InvalidOptionType,
    InvalidStepDirection,
    InvalidFactorValue,
    ConfigurationError,
    UnsupportedFeatureError,
    NumericalError,
)
from .contract import OptionContract, OptionFactors
from .valuation import OptionValuation
from .matrix import (
    generate_matrix,
    generate_batch_matrix,
    matrix_price,
    matrix_delta,
    matrix_gamma,
)


__all__ = [
    "ExerciseType",
    "Factor",
    "Greek",
    "OptionType",
    "OptionAnalyticsError",
    "ValidationError",
    "InvalidFactorName",
    "InvalidOptionType",
    "InvalidStepDirection",
    "InvalidFactorValue",
    "ConfigurationError",
    "UnsupportedFeatureError",
    "NumericalError",
    "OptionContract",
    "OptionFactors",
    "OptionValuation",
    "generate_matrix",
    "generate_batch_matrix",
    "matrix_price",
    "matrix_delta",
    "matrix_gamma",
]
