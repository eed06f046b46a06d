"""HTML formatter for scenes, with the display-mode fallback chain.

Each display mode maps to an ordered list of render tiers:

    png         raster
    svg         vector -> raster
    web_plotly  interactive -> vector -> raster

A tier either renders, declines (the interactive exporter does not support
the scene) or exceeds (the SVG is larger than ``svg_size_limit``). The chain
only moves forward and never retries a tier. Notes from exceeded tiers are
shown below the output of the tier that finally renders.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from matplotlib.figure import Figure

from ..display_config import DisplayMode, DisplayOptions, get_options, resolve_mode
from ..exceptions import NbSceneError, UnknownDisplayModeError
from ..html_content import embed_png, embed_svg, note
from ..rendering import MatplotlibRenderer, SceneRenderer
from .base import HTML_MIME_TYPE, TypeFormatter

logger = logging.getLogger(__name__)

RENDERED = "rendered"
DECLINED = "declined"
EXCEEDED = "exceeded"


@dataclass(frozen=True)
class TierOutcome:
    """Result of one render attempt."""
    status: str
    html: str = ""
    message: Optional[str] = None

    @classmethod
    def rendered(cls, html: str) -> "TierOutcome":
        return cls(RENDERED, html=html)

    @classmethod
    def declined(cls, reason: str) -> "TierOutcome":
        return cls(DECLINED, message=reason)

    @classmethod
    def exceeded(cls, note_text: str) -> "TierOutcome":
        return cls(EXCEEDED, message=note_text)


class RenderTier(ABC):
    """One step of the fallback chain."""

    name: str = ""

    @abstractmethod
    def attempt(self, scene: Any, renderer: SceneRenderer, options: DisplayOptions) -> TierOutcome:
        pass


class RasterTier(RenderTier):
    name = "png"

    def attempt(self, scene, renderer, options):
        png_bytes = renderer.render_png(scene, options.size)
        return TierOutcome.rendered(embed_png(png_bytes, options.width, options.height))


class VectorTier(RenderTier):
    name = "svg"

    def attempt(self, scene, renderer, options):
        svg_bytes = renderer.render_svg(scene, options.size)
        if len(svg_bytes) <= options.svg_size_limit:
            return TierOutcome.rendered(embed_svg(svg_bytes))
        # Large SVGs render very slowly in the browser
        limit_mb = options.svg_size_limit / (1000 * 1000)
        return TierOutcome.exceeded(
            f"Note: SVG output too large (> {limit_mb:g} MBytes). Using bitmap (PNG) instead."
        )


class InteractiveTier(RenderTier):
    name = "web_plotly"

    def attempt(self, scene, renderer, options):
        chart = renderer.export_interactive(scene, options.size)
        if chart is None:
            return TierOutcome.declined("interactive export does not support this scene")
        return TierOutcome.rendered(
            chart.to_html(
                full_html=False,
                include_plotlyjs="cdn",
                default_width=f"{options.width}px",
                default_height=f"{options.height}px",
            )
        )


FALLBACK_CHAINS: Dict[DisplayMode, Sequence[RenderTier]] = {
    DisplayMode.PNG: (RasterTier(),),
    DisplayMode.SVG: (VectorTier(), RasterTier()),
    DisplayMode.WEB_PLOTLY: (InteractiveTier(), VectorTier(), RasterTier()),
}


def render_scene(
    scene: Any,
    renderer: SceneRenderer,
    options: DisplayOptions,
    chains: Optional[Dict[DisplayMode, Sequence[RenderTier]]] = None,
) -> str:
    """Render a scene to HTML following the fallback chain of the current mode.

    Args:
        scene: The scene to render
        renderer: Rendering engine
        options: Display options; ``options.mode`` is read on every call
        chains: Tier lists per display mode (defaults to FALLBACK_CHAINS)

    Returns:
        HTML fragment

    Raises:
        UnknownDisplayModeError: If the mode is not a DisplayMode
    """
    chains = FALLBACK_CHAINS if chains is None else chains
    mode = resolve_mode(options.mode)
    if mode not in chains:
        raise UnknownDisplayModeError(f"No render chain configured for display mode {mode.value!r}")

    notes = []
    for tier in chains[mode]:
        outcome = tier.attempt(scene, renderer, options)
        if outcome.status == RENDERED:
            logger.debug("Scene rendered by tier %r (mode %r)", tier.name, mode.value)
            return outcome.html + "".join(note(text) for text in notes)
        if outcome.status == EXCEEDED:
            logger.info(outcome.message)
            notes.append(outcome.message)
        else:
            logger.debug("Tier %r declined: %s", tier.name, outcome.message)

    raise NbSceneError(f"No render tier produced output for display mode {mode.value!r}")


class HtmlSceneFormatter(TypeFormatter):
    """Formats matplotlib figures as HTML according to the display mode."""

    mime_type = HTML_MIME_TYPE
    types = (Figure,)

    def __init__(
        self,
        options: Optional[DisplayOptions] = None,
        renderer: Optional[SceneRenderer] = None,
        chains: Optional[Dict[DisplayMode, Sequence[RenderTier]]] = None,
    ):
        self.options = get_options(options)
        self.renderer = renderer if renderer is not None else MatplotlibRenderer()
        self.chains = chains

    def write(self, instance: Figure) -> str:
        return render_scene(instance, self.renderer, self.options, self.chains)
