import logging

import numpy as np

from ..contract import OptionContract, OptionFactors
from ..enums import ExerciseType, Factor, Greek, OptionType
from ..exceptions import (
    ConfigurationError,
    InvalidFactorValue,
    UnsupportedFeatureError,
    ValidationError,
)
from ..validation import canonicalize_option_type
from . import european, perpetual
from .params import FiniteDifferenceParams, ParityParams, SweepParams
from .sweeps import Kernel, evaluate_override, evaluate_sweep

logger = logging.getLogger(__name__)

# ── Kernel registry ─────────────────────────────────────────────────
# Maps (ExerciseType, Greek, OptionType) → six-factor kernel.
_KERNEL_REGISTRY: dict[tuple[ExerciseType, Greek, OptionType], Kernel] = {
    (ExerciseType.EUROPEAN, Greek.PRICE, OptionType.CALL): european.call_price,
    (ExerciseType.EUROPEAN, Greek.PRICE, OptionType.PUT): european.put_price,
    (ExerciseType.EUROPEAN, Greek.DELTA, OptionType.CALL): european.call_delta,
    (ExerciseType.EUROPEAN, Greek.DELTA, OptionType.PUT): european.put_delta,
    (ExerciseType.EUROPEAN, Greek.GAMMA, OptionType.CALL): european.gamma,
    (ExerciseType.EUROPEAN, Greek.GAMMA, OptionType.PUT): european.gamma,
    (ExerciseType.PERPETUAL_AMERICAN, Greek.PRICE, OptionType.CALL): perpetual.ignore_expiry(
        perpetual.call_price
    ),
    (ExerciseType.PERPETUAL_AMERICAN, Greek.PRICE, OptionType.PUT): perpetual.ignore_expiry(
        perpetual.put_price
    ),
}


def resolve_kernel(
    exercise_type: ExerciseType, greek: Greek, option_type: OptionType
) -> Kernel:
    """Look up the closed-form kernel for a family, quantity and option type."""
    kernel = _KERNEL_REGISTRY.get((exercise_type, greek, option_type))
    if kernel is None:
        raise UnsupportedFeatureError(
            f"{greek.value} is not available for {exercise_type.value} options."
        )
    return kernel


class OptionValuation:
    """Closed-form valuation of one option contract.

    Dispatches on the contract's exercise family and option type. The
    contract is read on every call, so toggling or resetting it is reflected
    in the next query; the valuation itself never mutates it.

    Attributes
    ==========
    contract: OptionContract
        The contract being valued.
    fd_params: FiniteDifferenceParams
        Default bump for finite-difference greeks.
    parity_params: ParityParams
        Tolerance for put-call parity checks.
    sweep_params: SweepParams
        Sweep configuration (timing logs).

    Methods
    =======
    price, delta, gamma:
        Point value from the stored contract.
    price_at, delta_at, gamma_at:
        Value with one named factor replaced.
    price_sweep, delta_sweep, gamma_sweep:
        Values as one factor sweeps a range, in sweep order.
    approx_delta, approx_gamma:
        Central-difference estimates built on ``price_at``.
    parity, parity_holds:
        Put-call parity counterpart price and check (European only).

    Delta and gamma are only defined for the European family.
    """

    def __init__(
        self,
        contract: OptionContract,
        *,
        fd_params: FiniteDifferenceParams | None = None,
        parity_params: ParityParams | None = None,
        sweep_params: SweepParams | None = None,
    ) -> None:
        if not isinstance(contract, OptionContract):
            raise ConfigurationError(
                f"contract must be OptionContract, got {type(contract).__name__}"
            )
        self.contract = contract
        self.fd_params = FiniteDifferenceParams() if fd_params is None else fd_params
        self.parity_params = ParityParams() if parity_params is None else parity_params
        self.sweep_params = SweepParams() if sweep_params is None else sweep_params

    @property
    def factors(self) -> OptionFactors:
        return self.contract.factors

    @property
    def option_type(self) -> OptionType:
        return self.contract.option_type

    @property
    def exercise_type(self) -> ExerciseType:
        return self.contract.exercise_type

    def kernel(self, greek: Greek) -> Kernel:
        return resolve_kernel(self.exercise_type, greek, self.option_type)

    # ── generic forms ──────────────────────────────────────────────

    def _point(self, greek: Greek) -> float:
        return self.kernel(greek)(*self.factors.as_tuple())

    def _at(self, greek: Greek, factor: Factor | str, value: float) -> float:
        return evaluate_override(self.kernel(greek), self.factors, factor, value)

    def _sweep(
        self, greek: Greek, factor: Factor | str, start: float, end: float, step: float
    ) -> np.ndarray:
        return evaluate_sweep(
            self.kernel(greek),
            self.factors,
            factor,
            start,
            end,
            step,
            params=self.sweep_params,
        )

    # ── price ──────────────────────────────────────────────────────

    def price(self) -> float:
        return self._point(Greek.PRICE)

    def price_at(self, factor: Factor | str, value: float) -> float:
        return self._at(Greek.PRICE, factor, value)

    def price_sweep(
        self, factor: Factor | str, start: float, end: float, step: float
    ) -> np.ndarray:
        return self._sweep(Greek.PRICE, factor, start, end, step)

    # ── delta ──────────────────────────────────────────────────────

    def delta(self) -> float:
        return self._point(Greek.DELTA)

    def delta_at(self, factor: Factor | str, value: float) -> float:
        return self._at(Greek.DELTA, factor, value)

    def delta_sweep(
        self, factor: Factor | str, start: float, end: float, step: float
    ) -> np.ndarray:
        return self._sweep(Greek.DELTA, factor, start, end, step)

    # ── gamma ──────────────────────────────────────────────────────

    def gamma(self) -> float:
        return self._point(Greek.GAMMA)

    def gamma_at(self, factor: Factor | str, value: float) -> float:
        return self._at(Greek.GAMMA, factor, value)

    def gamma_sweep(
        self, factor: Factor | str, start: float, end: float, step: float
    ) -> np.ndarray:
        return self._sweep(Greek.GAMMA, factor, start, end, step)

    # ── finite differences ─────────────────────────────────────────

    def _bump_and_center(self, h: float | None, spot: float | None) -> tuple[float, float]:
        h = self.fd_params.bump if h is None else h
        if not np.isfinite(h) or h == 0:
            raise ValidationError(f"finite-difference bump must be finite and non-zero, got {h}")
        center = self.factors.spot if spot is None else spot
        return h, center

    def approx_delta(self, h: float | None = None, *, spot: float | None = None) -> float:
        """Central-difference delta.

        delta ≈ (V(s + h) - V(s - h)) / (2h)

        Parameters
        ----------
        h : float, optional
            Spot bump. Defaults to ``fd_params.bump``.
        spot : float, optional
            Center of the difference. Defaults to the contract's spot.
        """
        h, s = self._bump_and_center(h, spot)
        up = self.price_at(Factor.S, s + h)
        down = self.price_at(Factor.S, s - h)
        return (up - down) / (2.0 * h)

    def approx_gamma(self, h: float | None = None, *, spot: float | None = None) -> float:
        """Central-difference gamma.

        gamma ≈ (V(s + h) + V(s - h) - 2 V(s)) / h^2
        """
        h, s = self._bump_and_center(h, spot)
        up = self.price_at(Factor.S, s + h)
        down = self.price_at(Factor.S, s - h)
        mid = self.price_at(Factor.S, s)
        return (up + down - 2.0 * mid) / (h * h)

    # ── put-call parity ────────────────────────────────────────────

    def parity(self, price: float, option_type: OptionType | str) -> float:
        """Return the parity counterpart of a call or put price.

        For a call price C the put is ``C - S + K e^{-rT}``; for a put price
        P the call is ``P + S - K e^{-rT}``.
        """
        if self.exercise_type is not ExerciseType.EUROPEAN:
            raise UnsupportedFeatureError("Put-call parity is only defined for European options.")
        option_type = canonicalize_option_type(option_type)
        if not np.isfinite(price) or price < 0:
            raise InvalidFactorValue()

        f = self.factors
        pv_strike = f.strike * np.exp(-f.rate * f.expiry)
        if option_type is OptionType.CALL:
            return float(price - f.spot + pv_strike)
        return float(price + f.spot - pv_strike)

    def parity_holds(self, call_price: float, put_price: float) -> bool:
        """Whether a call and a put price satisfy parity within tolerance."""
        gap = abs(self.parity(call_price, OptionType.CALL) - put_price)
        logger.debug("Parity gap %.3e (tolerance %.1e)", gap, self.parity_params.tolerance)
        return bool(gap < self.parity_params.tolerance)

    def describe(self) -> str:
        return self.contract.describe()
