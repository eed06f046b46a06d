"""Quick constructors for line plots."""

from typing import Iterable, List, Optional, Union

from matplotlib.figure import Figure

from ..exceptions import InvalidArgumentError
from ._arrays import (
    AxisScale,
    apply_log_ticks,
    axis_label,
    is_matrix,
    is_vector,
    require,
    resolve_scale,
    scale_values,
)


def _legend_labels(labels: Optional[Iterable[Optional[str]]]) -> List[str]:
    if labels is None:
        return []
    return [label for label in labels if label is not None]


def _finish_axes(ax, lines, x_scale, y_scale, x_label, y_label, labels, three_d=False) -> None:
    if three_d:
        apply_log_ticks(ax.xaxis, x_scale)
        apply_log_ticks(ax.yaxis, y_scale)
    else:
        ax.set_xscale(x_scale.value)
        ax.set_yscale(y_scale.value)
    ax.set_xlabel(axis_label(x_label, "X Axis"))
    ax.set_ylabel(axis_label(y_label, "Y Axis"))

    legend_labels = _legend_labels(labels)
    if legend_labels and lines:
        for line, label in zip(lines, legend_labels):
            line.set_label(label)
        ax.legend(handles=lines[: len(legend_labels)])


def plot(
    x,
    y1,
    y2=None,
    y3=None,
    y4=None,
    x_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    y_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    x_label: Optional[str] = None,
    y_label: Optional[str] = None,
    labels: Optional[Iterable[Optional[str]]] = None,
) -> Figure:
    """Line plot of up to four y-series against a common x vector.

    Args:
        x: x-values, a 1-dim vector
        y1: First y-series (``None`` series are skipped)
        y2: Optional second y-series
        y3: Optional third y-series
        y4: Optional fourth y-series
        x_scale: Scale of the x axis ("linear" or "log")
        y_scale: Scale of the y axis ("linear" or "log")
        x_label: x axis label, "X Axis" if empty
        y_label: y axis label, "Y Axis" if empty
        labels: Legend labels; ``None`` entries are dropped

    Returns:
        A new Figure containing the plot

    Raises:
        InvalidArgumentError: If x is None or not a vector, or a y-series is
            not a vector of the same length as x

    Example:
        >>> fig = plot([0, 1, 2], [0, 1, 4], labels=["squares"])
    """
    x_values = require(x, "x")
    if not is_vector(x_values):
        raise InvalidArgumentError("Argument 'x' must be a 1-dim vector.")

    y_values = []
    for name, y in (("y1", y1), ("y2", y2), ("y3", y3), ("y4", y4)):
        if y is None:
            continue
        values = require(y, name)
        if not is_vector(values):
            raise InvalidArgumentError("All arguments 'y' must be a 1-dim vector.")
        if values.size != x_values.size:
            raise InvalidArgumentError(
                "Arguments 'x' and all 'y' must be vectors with same length (number of elements)."
            )
        y_values.append(values.ravel())
    x_scale = resolve_scale(x_scale, "x_scale")
    y_scale = resolve_scale(y_scale, "y_scale")

    figure = Figure()
    ax = figure.add_subplot()
    lines = []
    for values in y_values:
        lines.extend(ax.plot(x_values.ravel(), values))
    _finish_axes(ax, lines, x_scale, y_scale, x_label, y_label, labels)
    return figure


def plot_positions(
    positions,
    x_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    y_scale: Union[str, AxisScale] = AxisScale.LINEAR,
    x_label: Optional[str] = None,
    y_label: Optional[str] = None,
    labels: Optional[Iterable[Optional[str]]] = None,
) -> Figure:
    """Line plot from a positions matrix.

    ``positions`` has two rows (x; y) for a 2D line or three rows (x; y; z)
    for a 3D line, one column per point.
    """
    values = require(positions, "positions")
    if not is_matrix(values) or values.shape[0] not in (2, 3):
        raise InvalidArgumentError(
            "Argument 'positions' must be a matrix with 2 (x, y) or 3 (x, y, z) rows."
        )
    x_scale = resolve_scale(x_scale, "x_scale")
    y_scale = resolve_scale(y_scale, "y_scale")

    three_d = values.shape[0] == 3
    if three_d:
        xs = scale_values(values[0], x_scale, "positions")
        ys = scale_values(values[1], y_scale, "positions")

    figure = Figure()
    if three_d:
        ax = figure.add_subplot(projection="3d")
        lines = ax.plot(xs, ys, values[2])
    else:
        ax = figure.add_subplot()
        lines = ax.plot(values[0], values[1])
    _finish_axes(ax, list(lines), x_scale, y_scale, x_label, y_label, labels, three_d=three_d)
    return figure
