"""HTML formatter for bitmaps."""

from typing import Optional

from PIL import Image

from ..html_content import embed_image
from ..display_config import DisplayOptions, get_options
from .base import HTML_MIME_TYPE, TypeFormatter


class HtmlBitmapFormatter(TypeFormatter):
    """Embeds PIL images as base64 PNG, shown at the configured display size."""

    mime_type = HTML_MIME_TYPE
    types = (Image.Image,)

    def __init__(self, options: Optional[DisplayOptions] = None):
        self.options = get_options(options)

    def write(self, instance: Image.Image) -> str:
        return embed_image(instance, self.options.width, self.options.height)
