"""Plain-text formatters for numeric values."""

from typing import Optional

import numpy as np

from ..display_config import DisplayOptions, get_options
from .base import PLAIN_TEXT_MIME_TYPE, TypeFormatter


class PlainTextComplexFormatter(TypeFormatter):
    """Complex scalars in their canonical string form, e.g. ``(1+2j)``."""

    mime_type = PLAIN_TEXT_MIME_TYPE
    types = (complex, np.complexfloating)

    def write(self, instance) -> str:
        return str(instance)


class PlainTextArrayFormatter(TypeFormatter):
    """numpy arrays, summarized once they exceed ``max_array_elements``."""

    mime_type = PLAIN_TEXT_MIME_TYPE
    types = (np.ndarray,)

    def __init__(self, options: Optional[DisplayOptions] = None):
        self.options = get_options(options)

    def write(self, instance: np.ndarray) -> str:
        with np.printoptions(threshold=self.options.max_array_elements):
            return repr(instance)
