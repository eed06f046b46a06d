"""Render scenes to IPython display objects on demand."""

import dataclasses
from typing import Any, Optional, Union

from IPython.display import HTML

from .display_config import DisplayMode, DisplayOptions, get_options
from .exceptions import InvalidArgumentError
from .formatters import Declined, HtmlSceneFormatter
from .rendering import SceneRenderer


def render(
    scene: Any,
    mode: Optional[Union[str, DisplayMode]] = None,
    options: Optional[DisplayOptions] = None,
    renderer: Optional[SceneRenderer] = None,
) -> HTML:
    """Render a scene to an IPython HTML object.

    Unlike automatic display, this accepts a one-off ``mode`` that overrides
    the configured display mode for this call only.

    Example:
        >>> from nbscene import plot, render
        >>> render(plot([0, 1, 2], [0, 1, 4]), mode="svg")
    """
    display_options = get_options(options)
    if mode is not None:
        display_options = dataclasses.replace(display_options, mode=mode)

    result = HtmlSceneFormatter(display_options, renderer).format(scene)
    if isinstance(result, Declined):
        raise InvalidArgumentError(f"Cannot render {type(scene).__name__}: {result.reason}")
    return HTML(result.text)
