"""Plot pricing quantities against one swept factor."""

from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from ..enums import Factor, Greek
from ..validation import canonicalize_factor
from ..valuation.sweeps import sweep_points

if TYPE_CHECKING:
    from ..valuation.core import OptionValuation

_COLORS = {
    Greek.PRICE: "black",
    Greek.DELTA: "tab:blue",
    Greek.GAMMA: "orange",
}


def plot_factor_sweep(
    valuation: "OptionValuation",
    factor: Factor | str,
    start: float,
    end: float,
    step: float,
    greeks: Sequence[Greek] = (Greek.PRICE,),
    figsize: tuple[float, float] = (12, 4),
) -> Figure:
    """Plot one panel per quantity as a single factor sweeps a range.

    Parameters
    ----------
    valuation : OptionValuation
        Valuation whose contract supplies the fixed factors.
    factor : Factor | str
        Factor to sweep (T, K, SIG, R, B or S).
    start, end, step : float
        Sweep range, walked by repeated addition of ``step``.
    greeks : Sequence[Greek], optional
        Quantities to plot (default: price only).
    figsize : tuple[float, float], optional
        Figure size (default: (12, 4))

    Returns
    -------
    Figure
        Matplotlib figure object
    """
    factor = canonicalize_factor(factor)
    sweeps = {
        Greek.PRICE: valuation.price_sweep,
        Greek.DELTA: valuation.delta_sweep,
        Greek.GAMMA: valuation.gamma_sweep,
    }
    # Evaluate first so an invalid request fails before a figure is created.
    curves = [(greek, sweeps[greek](factor, start, end, step)) for greek in greeks]
    x_values = np.asarray(sweep_points(start, end, step), dtype=float)

    fig, axes = plt.subplots(1, len(curves), figsize=figsize, squeeze=False)
    current = valuation.factors.value(factor)
    for ax, (greek, values) in zip(axes[0], curves):
        ax.plot(x_values, values, linewidth=2, color=_COLORS[greek])
        ax.axvline(x=current, color="r", linestyle="--", alpha=0.5)
        ax.set_xlabel(factor.value)
        ax.set_ylabel(greek.value.capitalize())
        ax.set_title(f"{greek.value.capitalize()} vs {factor.value}")
        ax.grid(True, alpha=0.3)

    plt.tight_layout()
    return fig
