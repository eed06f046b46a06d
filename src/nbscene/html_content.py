"""HTML fragments embedding rendered images for notebook output."""

import base64
import html
import io
import re
import uuid
from typing import Union

from .exceptions import InvalidArgumentError

_XML_PROLOG = re.compile(r"<\?xml[^>]*\?>")
# The internal subset in brackets may itself contain ">"
_DOCTYPE = re.compile(r"<!DOCTYPE[^\[>]*(\[[^\]]*\])?\s*>", re.IGNORECASE)


def new_element_id(prefix: str) -> str:
    """Return a unique HTML element id such as ``svg-1f0c...``."""
    return prefix + uuid.uuid4().hex


def embed_png(png_bytes: bytes, width: int, height: int) -> str:
    """Embed PNG bytes as an ``<img>`` with a base64 data URI.

    Args:
        png_bytes: Encoded PNG image
        width: Displayed width in pixels
        height: Displayed height in pixels

    Returns:
        HTML ``<img>`` element
    """
    if png_bytes is None:
        raise InvalidArgumentError("Argument 'png_bytes' must not be None.")
    if width <= 0 or height <= 0:
        raise InvalidArgumentError(f"Image size must be positive, got {width}x{height}.")

    encoded = base64.b64encode(bytes(png_bytes)).decode("ascii")
    return f'<img src="data:image/png;base64,{encoded}" width="{int(width)}" height="{int(height)}" />'


def embed_image(image, width: int, height: int) -> str:
    """Encode a PIL image as PNG and embed it with :func:`embed_png`."""
    if image is None:
        raise InvalidArgumentError("Argument 'image' must not be None.")
    with io.BytesIO() as buffer:
        image.save(buffer, format="PNG")
        return embed_png(buffer.getvalue(), width, height)


def strip_svg_prolog(svg_data: str) -> str:
    """Remove XML/DOCTYPE declarations and line breaks that break HTML embedding."""
    svg_data = _XML_PROLOG.sub("", svg_data)
    svg_data = _DOCTYPE.sub("", svg_data)
    return svg_data.replace("\r", "").replace("\n", "")


def embed_svg(svg: Union[str, bytes]) -> str:
    """Inline SVG markup in a ``<div>`` with a unique id.

    The markup is not validated; anything left after stripping the prolog,
    doctype and line breaks is embedded as-is.
    """
    if svg is None:
        raise InvalidArgumentError("Argument 'svg' must not be None.")
    if isinstance(svg, (bytes, bytearray)):
        svg = bytes(svg).decode("utf-8")

    return f'<div id="{new_element_id("svg-")}">{strip_svg_prolog(svg)}</div>'


def note(text: str) -> str:
    """Visible bold note shown below a rendered scene."""
    return f"<div><b>{html.escape(text)}</b></div>"
