"""nbscene: display matplotlib scenes in Jupyter notebooks.

Scenes (matplotlib figures) are shown as an interactive plotly chart, an
inline SVG or an embedded PNG, depending on ``nbscene.options.mode``, with
an automatic fallback when a format is not available. Quick constructors
build common line and surface plots.

Example:
    >>> %load_ext nbscene
    >>> import nbscene
    >>> nbscene.options.mode = "svg"
    >>> nbscene.plot([0, 1, 2], [0, 1, 4], labels=["squares"])
"""

import logging
from typing import Any, Optional

from .exceptions import InvalidArgumentError, NbSceneError, UnknownDisplayModeError
from .formatters import FormatterRegistry, HtmlSceneFormatter, default_registry
from .html_content import embed_png, embed_svg
from .notebook import render
from .display_config import (
    DisplayMode,
    DisplayOptions,
    load_display_options,
    options,
    read_display_config,
)
from .plots import AxisScale, plot, plot_positions, surf, surf_function, surf_positions
from .rendering import MatplotlibRenderer, SceneRenderer
from .scene_io import save_as_png, save_as_svg, save_as_tikz
from .web_export import export_figure

logger = logging.getLogger(__name__)

__version__ = "0.1.0"

_registry: Optional[FormatterRegistry] = None


def load_ipython_extension(ipython: Any) -> None:
    """Install the nbscene formatters (``%load_ext nbscene``).

    Settings from ``nbscene.yaml`` in the working directory, if present,
    are applied to the shared ``options`` first.
    """
    global _registry
    config = read_display_config()
    if config:
        options.update_from_dict(config)
    if _registry is not None:
        _registry.uninstall(ipython)
    _registry = default_registry(options)
    _registry.install(ipython)
    logger.debug("nbscene formatters installed (mode=%s)", options.mode.value)


def unload_ipython_extension(ipython: Any) -> None:
    """Remove the nbscene formatters (``%unload_ext nbscene``)."""
    global _registry
    if _registry is not None:
        _registry.uninstall(ipython)
        _registry = None


__all__ = [
    # Configuration
    "DisplayMode",
    "DisplayOptions",
    "options",
    "load_display_options",
    # Quick plots
    "AxisScale",
    "plot",
    "plot_positions",
    "surf",
    "surf_positions",
    "surf_function",
    # File export
    "save_as_svg",
    "save_as_png",
    "save_as_tikz",
    # Rendering & formatting
    "SceneRenderer",
    "MatplotlibRenderer",
    "HtmlSceneFormatter",
    "FormatterRegistry",
    "default_registry",
    "export_figure",
    "embed_png",
    "embed_svg",
    "render",
    # IPython extension
    "load_ipython_extension",
    "unload_ipython_extension",
    # Exceptions
    "NbSceneError",
    "InvalidArgumentError",
    "UnknownDisplayModeError",
]
