"""Visualization module for option analytics.

This module provides plotting functions for:
- Price, delta and gamma curves against one swept factor
"""

from .sweeps import plot_factor_sweep

__all__ = [
    "plot_factor_sweep",
]
