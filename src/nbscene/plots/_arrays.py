"""Argument validation shared by the quick plot constructors."""

from enum import Enum
from typing import Any, Optional, Union

import numpy as np
from matplotlib.ticker import FuncFormatter

from ..exceptions import InvalidArgumentError


class AxisScale(str, Enum):
    LINEAR = "linear"
    LOGARITHMIC = "log"


def resolve_scale(scale: Union[str, AxisScale], name: str) -> AxisScale:
    try:
        return AxisScale(scale)
    except ValueError:
        raise InvalidArgumentError(
            f"Argument '{name}' must be one of {[s.value for s in AxisScale]}, got {scale!r}."
        ) from None


def as_float_array(value: Any, name: str) -> np.ndarray:
    """Convert array-like input to a float ndarray."""
    try:
        return np.asarray(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"Argument '{name}' must be numeric array data: {e}") from e


def require(value: Any, name: str) -> np.ndarray:
    """Reject None and convert to a float ndarray."""
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' must not be None.")
    return as_float_array(value, name)


def is_vector(array: np.ndarray) -> bool:
    """1-dim, or 2-dim with a single row or column."""
    return array.ndim == 1 or (array.ndim == 2 and 1 in array.shape)


def is_matrix(array: np.ndarray) -> bool:
    return array.ndim == 2


def axis_label(label: Optional[str], default: str) -> str:
    return label if label else default


def scale_values(values: np.ndarray, scale: AxisScale, name: str) -> np.ndarray:
    """Map data onto a 3D axis; logarithmic axes plot log10 of the data.

    3D axes only draw linear scales, so log axes are emulated by plotting
    the exponent and labelling ticks as powers of ten.
    """
    if scale is AxisScale.LINEAR:
        return values
    if np.any(values <= 0):
        raise InvalidArgumentError(f"Argument '{name}' must be positive for a logarithmic axis.")
    return np.log10(values)


def _power_of_ten(value, pos=None) -> str:
    return f"$10^{{{value:g}}}$"


def apply_log_ticks(axis, scale: AxisScale) -> None:
    """Label the ticks of a log10-emulated 3D axis as powers of ten."""
    if scale is AxisScale.LOGARITHMIC:
        axis.set_major_formatter(FuncFormatter(_power_of_ten))
