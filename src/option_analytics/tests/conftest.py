"""Shared pytest fixtures for option_analytics tests."""

import pytest

from option_analytics.contract import OptionContract, OptionFactors
from option_analytics.enums import ExerciseType, OptionType
from option_analytics.valuation import OptionValuation


# ---------------------------------------------------------------------------
# Scalar constants
# ---------------------------------------------------------------------------

EXPIRY = 1.5
STRIKE = 120.0
VOL = 0.4
RATE = 0.04
CARRY = 0.0
SPOT = 100.0


@pytest.fixture()
def euro_factors() -> OptionFactors:
    return OptionFactors(
        expiry=EXPIRY,
        strike=STRIKE,
        volatility=VOL,
        rate=RATE,
        carry=CARRY,
        spot=SPOT,
    )


# ---------------------------------------------------------------------------
# Contracts
# ---------------------------------------------------------------------------


@pytest.fixture()
def euro_call(euro_factors: OptionFactors) -> OptionContract:
    return OptionContract(euro_factors, OptionType.CALL)


@pytest.fixture()
def euro_put(euro_factors: OptionFactors) -> OptionContract:
    return OptionContract(euro_factors, OptionType.PUT)


@pytest.fixture()
def perpetual_put() -> OptionContract:
    return OptionContract.from_values(
        K=100.0,
        sig=0.1,
        r=0.1,
        b=0.02,
        S=110.0,
        option_type=OptionType.PUT,
        exercise_type=ExerciseType.PERPETUAL_AMERICAN,
        name="American",
    )


# ---------------------------------------------------------------------------
# Valuations
# ---------------------------------------------------------------------------


@pytest.fixture()
def euro_call_valuation(euro_call: OptionContract) -> OptionValuation:
    return OptionValuation(euro_call)


@pytest.fixture()
def euro_put_valuation(euro_put: OptionContract) -> OptionValuation:
    return OptionValuation(euro_put)
