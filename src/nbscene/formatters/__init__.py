"""Notebook formatters for scenes, bitmaps and numeric values."""

from .base import (
    HTML_MIME_TYPE,
    PLAIN_TEXT_MIME_TYPE,
    Declined,
    FormatResult,
    Formatted,
    TypeFormatter,
)
from .html_bitmap import HtmlBitmapFormatter
from .html_scene import (
    FALLBACK_CHAINS,
    HtmlSceneFormatter,
    InteractiveTier,
    RasterTier,
    RenderTier,
    TierOutcome,
    VectorTier,
    render_scene,
)
from .plain_text import PlainTextArrayFormatter, PlainTextComplexFormatter
from .registry import FormatterRegistry, default_registry

__all__ = [
    "HTML_MIME_TYPE",
    "PLAIN_TEXT_MIME_TYPE",
    "Declined",
    "FormatResult",
    "Formatted",
    "TypeFormatter",
    "HtmlBitmapFormatter",
    "HtmlSceneFormatter",
    "PlainTextArrayFormatter",
    "PlainTextComplexFormatter",
    "FALLBACK_CHAINS",
    "RenderTier",
    "RasterTier",
    "VectorTier",
    "InteractiveTier",
    "TierOutcome",
    "render_scene",
    "FormatterRegistry",
    "default_registry",
]
