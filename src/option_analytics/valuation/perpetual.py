"""Closed-form perpetual American option kernels.

The perpetual (infinite-horizon) American option has no expiry, so the kernels
take five factors ``(K, sig, r, b, S)``. :func:`ignore_expiry` adapts them to
the six-factor signature shared with the European kernels::

    tmp = sqrt((b/sig^2 - 1/2)^2 + 2r/sig^2)

    call: y1 = 1/2 - b/sig^2 + tmp,  C = K/(y1 - 1) * ((y1 - 1) S / (K y1))^y1
    put:  y2 = 1/2 - b/sig^2 - tmp,  P = K/(1 - y2) * ((y2 - 1) S / (K y2))^y2
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

import numpy as np

from ..exceptions import NumericalError

__all__ = [
    "call_price",
    "put_price",
    "ignore_expiry",
]

_Y_TOL = 1e-12


def _exponent_terms(sig: float, r: float, b: float) -> tuple[float, float]:
    """Return ``(b / sig^2, tmp)``."""
    if sig == 0:
        raise NumericalError("Perpetual American pricing requires sig > 0")
    sig2 = sig * sig
    carry_ratio = b / sig2
    tmp = np.sqrt((carry_ratio - 0.5) ** 2 + 2.0 * r / sig2)
    return carry_ratio, float(tmp)


def call_price(K: float, sig: float, r: float, b: float, S: float) -> float:
    """Perpetual American call price.

    When b == r (y1 == 1) early exercise is never optimal and the value is S.
    For b > r there is no finite value.
    """
    carry_ratio, tmp = _exponent_terms(sig, r, b)
    y1 = 0.5 - carry_ratio + tmp
    if abs(y1 - 1.0) < _Y_TOL:
        return float(S)
    if y1 < 1.0:
        raise NumericalError(
            f"Perpetual American call has no finite value for b={b} > r={r}"
        )
    return float((K / (y1 - 1.0)) * ((y1 - 1.0) * S / (K * y1)) ** y1)


def put_price(K: float, sig: float, r: float, b: float, S: float) -> float:
    """Perpetual American put price.

    At S == 0 immediate exercise is worth K; with r == 0 (y2 == 0) the
    value tends to K as well.
    """
    carry_ratio, tmp = _exponent_terms(sig, r, b)
    y2 = 0.5 - carry_ratio - tmp
    if abs(y2) < _Y_TOL or S == 0:
        return float(K)
    return float((K / (1.0 - y2)) * ((y2 - 1.0) * S / (K * y2)) ** y2)


def ignore_expiry(
    kernel: Callable[[float, float, float, float, float], float],
) -> Callable[[float, float, float, float, float, float], float]:
    """Wrap a five-factor kernel so it accepts (and ignores) a leading T."""

    @wraps(kernel)
    def six_factor_kernel(T: float, K: float, sig: float, r: float, b: float, S: float) -> float:
        return kernel(K, sig, r, b, S)

    return six_factor_kernel
