"""Option valuation: closed-form kernels, override/sweep engines and dispatch.

Public API
----------
Core classes:
    OptionValuation: Dispatcher for price/delta/gamma queries on a contract
    resolve_kernel: Kernel lookup by exercise family, quantity and option type

Engines:
    evaluate_override: Evaluate a kernel with one factor replaced
    evaluate_sweep: Evaluate a kernel while one factor sweeps a range
    sweep_points: Factor values visited by a sweep

Parameter classes:
    FiniteDifferenceParams: Default bump for finite-difference greeks
    ParityParams: Tolerance for put-call parity checks
    SweepParams: Sweep/matrix configuration
"""

from .core import OptionValuation, resolve_kernel
from .params import FiniteDifferenceParams, ParityParams, SweepParams
from .sweeps import Kernel, evaluate_override, evaluate_sweep, sweep_points

__all__ = [
    # Core valuation classes
    "OptionValuation",
    "resolve_kernel",
    # Engines
    "Kernel",
    "evaluate_override",
    "evaluate_sweep",
    "sweep_points",
    # Parameter classes
    "FiniteDifferenceParams",
    "ParityParams",
    "SweepParams",
]
