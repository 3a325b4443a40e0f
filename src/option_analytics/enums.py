"""Enums for option valuation."""

from enum import Enum

__all__ = [
    "OptionType",
    "ExerciseType",
    "Factor",
    "Greek",
]


class OptionType(Enum):
    CALL = "C"
    PUT = "P"

    def toggled(self) -> "OptionType":
        return OptionType.PUT if self is OptionType.CALL else OptionType.CALL


class ExerciseType(Enum):
    EUROPEAN = "european"
    PERPETUAL_AMERICAN = "perpetual_american"


class Factor(Enum):
    """The six pricing inputs, keyed by their canonical (upper-case) token."""

    T = "T"
    K = "K"
    SIG = "SIG"
    R = "R"
    B = "B"
    S = "S"


class Greek(Enum):
    PRICE = "price"
    DELTA = "delta"
    GAMMA = "gamma"
