"""Helper functions for option valuation."""

from __future__ import annotations

from contextlib import contextmanager
from collections.abc import Iterator
import time

import numpy as np

__all__ = [
    "log_timing",
    "put_call_parity_rhs",
    "put_call_parity_gap",
]


@contextmanager
def log_timing(logger, label: str, enabled: bool) -> Iterator[None]:
    """Log timing for a code block when enabled is True."""
    if not enabled:
        yield
        return
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        logger.debug("Timing %s: %.6fs", label, elapsed)


def put_call_parity_rhs(*, T: float, K: float, r: float, b: float, S: float) -> float:
    """Compute the RHS of cost-of-carry put-call parity for European options.

    Returns C - P implied by no-arbitrage: ``S e^{(b-r)T} - K e^{-rT}``.
    """
    return float(S * np.exp((b - r) * T) - K * np.exp(-r * T))


def put_call_parity_gap(
    *,
    call_price: float,
    put_price: float,
    T: float,
    K: float,
    r: float,
    b: float,
    S: float,
) -> float:
    """Return call-put parity residual: (C - P) - RHS."""
    rhs = put_call_parity_rhs(T=T, K=K, r=r, b=b, S=S)
    return float(call_price - put_price - rhs)
