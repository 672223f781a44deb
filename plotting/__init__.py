"""Public exports for plotting helpers."""

from plotting.standard_plots import plot_dynamics, plot_phasor_diagram

__all__ = [
    "plot_dynamics",
    "plot_phasor_diagram",
]
