"""Parameter classes for valuation configuration.

Each concern (finite differences, parity checks, sweeps) has its own parameter
class that explicitly documents the options available for it.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class FiniteDifferenceParams:
    """Parameters for central-difference delta/gamma approximation.

    Attributes
    ==========
    bump:
        Spot bump ``h`` used when ``approx_delta``/``approx_gamma`` are called
        without an explicit one. Default: 0.01.
    """

    bump: float = 0.01

    def __post_init__(self):
        if not np.isfinite(self.bump) or self.bump <= 0:
            raise ValueError(f"bump must be positive and finite, got {self.bump}")


@dataclass(frozen=True, slots=True)
class ParityParams:
    """Parameters for put-call parity checks.

    Attributes
    ==========
    tolerance:
        Absolute tolerance under which two prices are said to satisfy parity.
        Default: 1e-5.
    """

    tolerance: float = 1e-5

    def __post_init__(self):
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")


@dataclass(frozen=True, slots=True)
class SweepParams:
    """Parameters for factor sweeps and matrix runs.

    Attributes
    ==========
    log_timings:
        Log the elapsed time of each sweep/matrix run at DEBUG level.
        Default: False.
    """

    log_timings: bool = False
