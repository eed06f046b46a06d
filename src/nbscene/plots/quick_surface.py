"""Quick constructors for 3D surface plots."""

from typing import Callable, Optional, Tuple, Union

import numpy as np
from matplotlib import colormaps
from matplotlib.colors import Normalize
from matplotlib.figure import Figure

from ..display_config import DisplayOptions, get_options
from ..exceptions import InvalidArgumentError
from ._arrays import (
    AxisScale,
    apply_log_ticks,
    as_float_array,
    axis_label,
    is_matrix,
    is_vector,
    require,
    resolve_scale,
    scale_values,
)

COLORMAP = "viridis"


def _grid_axis(value, name: str, grid_shape: Tuple[int, int], along_columns: bool) -> np.ndarray:
    """Expand None, a vector or a matrix of coordinates to the Z grid shape."""
    m, n = grid_shape
    length, length_name = (n, "n") if along_columns else (m, "m")
    message = (
        f"Argument '{name}' must be None, a vector of length {length_name} or a matrix "
        f"of size [m by n], with m = Z.shape[0], n = Z.shape[1]."
    )

    if value is None:
        coords = np.arange(length, dtype=float)
    else:
        coords = as_float_array(value, name)
        if is_matrix(coords) and coords.shape == grid_shape:
            return coords
        if not is_vector(coords) or coords.size != length:
            raise InvalidArgumentError(message)
        coords = coords.ravel()

    if along_columns:
        return np.tile(coords, (m, 1))
    return np.tile(coords.reshape(-1, 1), (1, n))


def surf(
    Z,
    X=None,
    Y=None,
    C=None,
    x_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    y_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    z_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    x_label: Optional[str] = None,
    y_label: Optional[str] = None,
    z_label: Optional[str] = None,
    options: Optional[DisplayOptions] = None,
) -> Figure:
    """Surface plot of Z over an (X, Y) grid.

    Args:
        Z: Matrix of heights [m by n]; a vector is drawn as a single row
        X: None, vector of length n or matrix [m by n] of x coordinates
        Y: None, vector of length m or matrix [m by n] of y coordinates
        C: Optional color data [m by n], mapped through the colormap
        x_scale: Scale of the x axis ("linear" or "log")
        y_scale: Scale of the y axis ("linear" or "log")
        z_scale: Scale of the z axis ("linear" or "log")
        x_label: x axis label, "X Axis" if empty
        y_label: y axis label, "Y Axis" if empty
        z_label: z axis label, "Z Axis" if empty
        options: Display options providing the view rotation

    Returns:
        A new Figure containing the surface

    Raises:
        InvalidArgumentError: If Z is None or neither a vector nor a matrix,
            or X, Y or C do not fit the shape of Z
    """
    z = require(Z, "Z")
    if not (is_vector(z) or is_matrix(z)):
        raise InvalidArgumentError("Argument 'Z' must be a vector or a matrix of size [m by n].")
    grid = z.reshape(1, -1) if z.ndim == 1 else z

    x = _grid_axis(X, "X", grid.shape, along_columns=True)
    y = _grid_axis(Y, "Y", grid.shape, along_columns=False)

    colors = None
    if C is not None:
        colors = as_float_array(C, "C")
        if colors.size != grid.size:
            raise InvalidArgumentError("Argument 'C' must have the same number of elements as 'Z'.")
        colors = colors.reshape(grid.shape)

    x_scale = resolve_scale(x_scale, "x_scale")
    y_scale = resolve_scale(y_scale, "y_scale")
    z_scale = resolve_scale(z_scale, "z_scale")
    xs = scale_values(x, x_scale, "X")
    ys = scale_values(y, y_scale, "Y")
    zs = scale_values(grid, z_scale, "Z")

    figure = Figure()
    ax = figure.add_subplot(projection="3d")
    if min(grid.shape) < 2:
        # A single row or column has no faces
        ax.plot(xs.ravel(), ys.ravel(), zs.ravel())
    elif colors is None:
        ax.plot_surface(xs, ys, zs, cmap=COLORMAP)
    else:
        facecolors = colormaps[COLORMAP](Normalize()(colors))
        ax.plot_surface(xs, ys, zs, facecolors=facecolors, shade=False)

    elevation, azimuth = get_options(options).surface_view
    ax.view_init(elev=elevation, azim=azimuth)

    apply_log_ticks(ax.xaxis, x_scale)
    apply_log_ticks(ax.yaxis, y_scale)
    apply_log_ticks(ax.zaxis, z_scale)
    ax.set_xlabel(axis_label(x_label, "X Axis"))
    ax.set_ylabel(axis_label(y_label, "Y Axis"))
    ax.set_zlabel(axis_label(z_label, "Z Axis"))
    return figure


def surf_positions(zxy, C=None, **kwargs) -> Figure:
    """Surface plot from stacked layers.

    ``zxy`` is either a matrix of heights [m by n] or an array [m by n by k]
    whose layers are Z (k >= 1), X (k >= 2) and Y (k = 3). Remaining
    keyword arguments are passed to :func:`surf`.
    """
    values = require(zxy, "zxy")
    if values.ndim == 2:
        return surf(values, C=C, **kwargs)
    if values.ndim != 3 or values.shape[2] not in (1, 2, 3):
        raise InvalidArgumentError("Argument 'zxy' must be a matrix of size [m x n x [1|2|3]].")

    layers = values.shape[2]
    x = values[:, :, 1] if layers > 1 else None
    y = values[:, :, 2] if layers > 2 else None
    return surf(values[:, :, 0], x, y, C=C, **kwargs)


def surf_function(
    z_func: Callable[[float, float], float],
    xmin: float = -10.0,
    xmax: float = 10.0,
    xlen: int = 50,
    ymin: float = -10.0,
    ymax: float = 10.0,
    ylen: int = 50,
    c_func: Optional[Callable[[float, float], float]] = None,
    **kwargs,
) -> Figure:
    """Surface plot of ``z = z_func(x, y)`` sampled on a regular grid.

    Example:
        >>> fig = surf_function(lambda x, y: np.sin(x) * np.cos(y), xlen=30, ylen=30)
    """
    if not callable(z_func):
        raise InvalidArgumentError("Argument 'z_func' must be callable.")
    if c_func is not None and not callable(c_func):
        raise InvalidArgumentError("Argument 'c_func' must be callable.")
    if xlen < 2 or ylen < 2:
        raise InvalidArgumentError("Arguments 'xlen' and 'ylen' must be at least 2.")

    x, y = np.meshgrid(np.linspace(xmin, xmax, xlen), np.linspace(ymin, ymax, ylen))
    z = np.vectorize(z_func, otypes=[float])(x, y)
    c = np.vectorize(c_func, otypes=[float])(x, y) if c_func is not None else None
    return surf(z, x, y, C=c, **kwargs)
