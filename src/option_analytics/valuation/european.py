"""Closed-form European option kernels under the cost-of-carry Black-Scholes model.

All kernels share the signature ``(T, K, sig, r, b, S) -> float`` so they can be
passed as first-class values to the override and sweep engines.

With ``vol_T = sig * sqrt(T)``::

    d1 = (ln(S/K) + (b + sig^2/2) T) / vol_T
    d2 = d1 - vol_T

    call = S e^{(b-r)T} N(d1) - K e^{-rT} N(d2)
    put  = K e^{-rT} N(-d2) - S e^{(b-r)T} N(-d1)
"""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

__all__ = [
    "call_price",
    "put_price",
    "call_delta",
    "put_delta",
    "gamma",
]

# Below this total volatility the deterministic limit is used.
_MIN_VOL_T = 1e-300


def _calculate_d_values(
    T: float, K: float, sig: float, r: float, b: float, S: float
) -> tuple[float, float, float]:
    """Return ``(d1, d2, vol_T)``.

    Zero (or near-zero) total volatility takes the deterministic limit:
    d1 = d2 = +inf when the forward is above the strike, -inf when below,
    and 0 when they are equal.
    """
    vol_t = sig * np.sqrt(T)
    with np.errstate(divide="ignore"):
        log_moneyness = np.log(S / K)

    if vol_t < _MIN_VOL_T:
        log_forward_moneyness = log_moneyness + b * T
        if log_forward_moneyness > 0:
            return np.inf, np.inf, vol_t
        if log_forward_moneyness < 0:
            return -np.inf, -np.inf, vol_t
        return 0.0, 0.0, vol_t

    d1 = (log_moneyness + (b + 0.5 * sig * sig) * T) / vol_t
    return d1, d1 - vol_t, vol_t


def call_price(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
    d1, d2, _ = _calculate_d_values(T, K, sig, r, b, S)
    carry_df = np.exp((b - r) * T)
    df = np.exp(-r * T)
    return float(S * carry_df * norm.cdf(d1) - K * df * norm.cdf(d2))


def put_price(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
    d1, d2, _ = _calculate_d_values(T, K, sig, r, b, S)
    carry_df = np.exp((b - r) * T)
    df = np.exp(-r * T)
    return float(K * df * norm.cdf(-d2) - S * carry_df * norm.cdf(-d1))


def call_delta(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
    """delta = e^{(b-r)T} N(d1)"""
    d1, _, _ = _calculate_d_values(T, K, sig, r, b, S)
    return float(np.exp((b - r) * T) * norm.cdf(d1))


def put_delta(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
    """delta = e^{(b-r)T} (N(d1) - 1)"""
    d1, _, _ = _calculate_d_values(T, K, sig, r, b, S)
    return float(np.exp((b - r) * T) * (norm.cdf(d1) - 1.0))


def gamma(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
    """Gamma, identical for calls and puts.

    gamma = e^{(b-r)T} N'(d1) / (S vol_T)

    Returns 0.0 in the deterministic limit and at S == 0, where the density
    term vanishes.
    """
    d1, _, vol_t = _calculate_d_values(T, K, sig, r, b, S)
    if vol_t < _MIN_VOL_T or S == 0:
        return 0.0
    return float(np.exp((b - r) * T) * norm.pdf(d1) / (S * vol_t))
