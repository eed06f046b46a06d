"""Quick constructors for common 2D and 3D plots."""

from ._arrays import AxisScale
from .quick_line import plot, plot_positions
from .quick_surface import surf, surf_function, surf_positions

__all__ = [
    "AxisScale",
    "plot",
    "plot_positions",
    "surf",
    "surf_function",
    "surf_positions",
]
