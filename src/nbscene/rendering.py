"""Renderer protocol and the matplotlib implementation.

The formatters only talk to a SceneRenderer; this keeps the fallback logic
independent of the plotting library and lets tests substitute fakes.
"""

import io
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Protocol, Tuple

from matplotlib.figure import Figure

from .web_export import export_figure

Size = Tuple[int, int]


class InteractiveChart(Protocol):
    """A chart that renders itself to an HTML fragment (e.g. a plotly Figure)."""

    def to_html(self, **options: Any) -> str:
        ...


class SceneRenderer(Protocol):
    """Protocol for the external rendering engine."""

    def render_png(self, scene: Any, size: Size) -> bytes:
        """Rasterize the scene to PNG bytes at the given pixel size."""
        ...

    def render_svg(self, scene: Any, size: Size) -> bytes:
        """Render the scene to SVG bytes at the given pixel size."""
        ...

    def export_interactive(self, scene: Any, size: Size) -> Optional[InteractiveChart]:
        """Export an interactive chart, or None if the scene is unsupported."""
        ...


@contextmanager
def figure_size(figure: Figure, size: Size, dpi: Optional[float] = None) -> Iterator[float]:
    """Temporarily resize a figure to an exact pixel size.

    Yields the dpi to pass to ``savefig``. The original size and dpi are
    restored on exit, including when rendering raises.
    """
    original_size = figure.get_size_inches().copy()
    original_dpi = figure.get_dpi()
    dpi = float(dpi or original_dpi)
    width, height = size
    try:
        figure.set_dpi(dpi)
        figure.set_size_inches(width / dpi, height / dpi, forward=False)
        yield dpi
    finally:
        figure.set_dpi(original_dpi)
        figure.set_size_inches(original_size, forward=False)


def write_figure(figure: Figure, target: Any, size: Size, fmt: str, dpi: Optional[float] = None) -> None:
    """Render a figure at the given pixel size into a path or binary stream."""
    with figure_size(figure, size, dpi) as effective_dpi:
        kwargs = {"format": fmt, "dpi": effective_dpi}
        if fmt == "svg":
            # Drop the timestamp so identical scenes give identical markup
            kwargs["metadata"] = {"Date": None}
        figure.savefig(target, **kwargs)


class MatplotlibRenderer:
    """Renders matplotlib figures with the Agg, SVG and plotly exporters."""

    def render_png(self, scene: Figure, size: Size) -> bytes:
        with io.BytesIO() as buffer:
            write_figure(scene, buffer, size, "png")
            return buffer.getvalue()

    def render_svg(self, scene: Figure, size: Size) -> bytes:
        with io.BytesIO() as buffer:
            write_figure(scene, buffer, size, "svg")
            return buffer.getvalue()

    def export_interactive(self, scene: Figure, size: Size):
        return export_figure(scene, size=size)
