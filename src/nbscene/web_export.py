"""Export simple matplotlib figures as interactive plotly charts.

Only 2D line charts are exported. For anything else the exporter declines
by returning None, and the caller falls back to a static rendering.
"""

import logging
from typing import Optional, Tuple

import numpy as np
import plotly.graph_objects as go
from matplotlib.colors import to_hex
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

logger = logging.getLogger(__name__)

_AXIS_TYPES = {"linear": "linear", "log": "log"}

_DASH_STYLES = {
    "-": "solid",
    "solid": "solid",
    "--": "dash",
    "dashed": "dash",
    ":": "dot",
    "dotted": "dot",
    "-.": "dashdot",
    "dashdot": "dashdot",
}

_NO_STYLE = ("None", "none", "", " ", None)


def _unsupported_reason(figure: Figure) -> Optional[str]:
    """Return why a figure cannot be exported, or None if it can."""
    axes = figure.get_axes()
    if len(axes) != 1:
        return f"expected exactly one axes, found {len(axes)}"
    ax = axes[0]
    if ax.name != "rectilinear":
        return f"unsupported projection {ax.name!r}"
    if ax.images or ax.collections or ax.patches or ax.tables:
        return "figure contains non-line artists"
    if ax.texts or figure.texts:
        return "figure contains text annotations"
    if not ax.get_lines():
        return "figure has no lines"
    for line in ax.get_lines():
        # axhline/axvline and friends are positioned in axes coordinates
        if line.get_transform() is not ax.transData:
            return f"line {line.get_label()!r} is not drawn in data coordinates"
    for scale in (ax.get_xscale(), ax.get_yscale()):
        if scale not in _AXIS_TYPES:
            return f"unsupported axis scale {scale!r}"
    return None


def _trace_mode(line: Line2D) -> str:
    has_line = line.get_linestyle() not in _NO_STYLE
    has_markers = line.get_marker() not in _NO_STYLE
    if has_line and has_markers:
        return "lines+markers"
    if has_markers:
        return "markers"
    return "lines"


def _line_to_trace(line: Line2D) -> go.Scatter:
    label = line.get_label()
    color = to_hex(line.get_color())
    return go.Scatter(
        x=np.asarray(line.get_xdata(), dtype=float).tolist(),
        y=np.asarray(line.get_ydata(), dtype=float).tolist(),
        mode=_trace_mode(line),
        name=label,
        showlegend=bool(label) and not label.startswith("_"),
        line=dict(
            color=color,
            width=line.get_linewidth(),
            dash=_DASH_STYLES.get(line.get_linestyle(), "solid"),
        ),
        marker=dict(color=color),
    )


def export_figure(figure: Figure, size: Optional[Tuple[int, int]] = None) -> Optional[go.Figure]:
    """Convert a matplotlib line chart into a plotly figure.

    Args:
        figure: The matplotlib figure to export
        size: Optional (width, height) in pixels for the chart layout

    Returns:
        A plotly Figure, or None if the figure is not a single 2D line chart.
        Errors raised while converting a supported figure propagate.
    """
    reason = _unsupported_reason(figure)
    if reason is not None:
        logger.debug("Interactive export declined: %s", reason)
        return None

    ax = figure.get_axes()[0]
    chart = go.Figure(data=[_line_to_trace(line) for line in ax.get_lines()])
    chart.update_xaxes(title_text=ax.get_xlabel(), type=_AXIS_TYPES[ax.get_xscale()])
    chart.update_yaxes(title_text=ax.get_ylabel(), type=_AXIS_TYPES[ax.get_yscale()])
    chart.update_layout(showlegend=ax.get_legend() is not None, template="plotly_white")
    if ax.get_title():
        chart.update_layout(title_text=ax.get_title())
    if size is not None:
        width, height = size
        chart.update_layout(width=width, height=height)
    return chart
