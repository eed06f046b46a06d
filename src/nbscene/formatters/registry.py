"""Registry mapping (MIME type, runtime type) to formatters.

The registry can format values directly (useful outside IPython and in
tests) or install its formatters into an IPython shell's DisplayFormatter.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from ..display_config import DisplayOptions, get_options
from ..rendering import SceneRenderer
from .base import PLAIN_TEXT_MIME_TYPE, Declined, FormatResult, Formatted, TypeFormatter
from .html_bitmap import HtmlBitmapFormatter
from .html_scene import HtmlSceneFormatter
from .plain_text import PlainTextArrayFormatter, PlainTextComplexFormatter

logger = logging.getLogger(__name__)

RegistryKey = Tuple[str, type]


class FormatterRegistry:
    """Formatters keyed by MIME type and the runtime type they handle."""

    def __init__(self, formatters: Optional[Iterable[TypeFormatter]] = None):
        self._formatters: Dict[RegistryKey, TypeFormatter] = {}
        # Callbacks that were registered in IPython before install()
        self._replaced: Dict[RegistryKey, Optional[Callable]] = {}
        for formatter in formatters or ():
            self.register(formatter)

    def register(self, formatter: TypeFormatter) -> None:
        """Register a formatter for each of its types, replacing earlier ones."""
        for handled_type in formatter.types:
            self._formatters[(formatter.mime_type, handled_type)] = formatter

    def keys(self) -> List[RegistryKey]:
        return list(self._formatters)

    def resolve(self, instance: Any, mime_type: str) -> Optional[TypeFormatter]:
        """Find the formatter for the most specific type in the instance's MRO."""
        for klass in type(instance).__mro__:
            formatter = self._formatters.get((mime_type, klass))
            if formatter is not None:
                return formatter
        return None

    def format(self, instance: Any, mime_type: str) -> FormatResult:
        formatter = self.resolve(instance, mime_type)
        if formatter is None:
            return Declined(f"no {mime_type} formatter registered for {type(instance).__name__}")
        return formatter.format(instance)

    # ------------------------------------------------------------------
    # IPython integration
    # ------------------------------------------------------------------

    def install(self, shell: Any) -> None:
        """Register all formatters with an IPython shell's display formatter."""
        display_formatters = shell.display_formatter.formatters
        for (mime_type, handled_type), formatter in self._formatters.items():
            if mime_type == PLAIN_TEXT_MIME_TYPE:
                callback = _pretty_callback(formatter)
            else:
                callback = _mime_callback(formatter)
            previous = display_formatters[mime_type].for_type(handled_type, callback)
            self._replaced[(mime_type, handled_type)] = previous
            logger.debug("Installed %s for %s (%s)", type(formatter).__name__, handled_type.__name__, mime_type)

    def uninstall(self, shell: Any) -> None:
        """Remove installed formatters, restoring the callbacks they replaced."""
        display_formatters = shell.display_formatter.formatters
        for (mime_type, handled_type), previous in self._replaced.items():
            display_formatters[mime_type].pop(handled_type, None)
            if previous is not None:
                display_formatters[mime_type].for_type(handled_type, previous)
        self._replaced.clear()


def _mime_callback(formatter: TypeFormatter) -> Callable[[Any], Optional[str]]:
    # IPython treats a None return as "no output for this MIME type"
    def callback(obj: Any) -> Optional[str]:
        result = formatter.format(obj)
        return result.text if isinstance(result, Formatted) else None

    return callback


def _pretty_callback(formatter: TypeFormatter) -> Callable[[Any, Any, bool], None]:
    def callback(obj: Any, p: Any, cycle: bool) -> None:
        result = formatter.format(obj)
        p.text(result.text if isinstance(result, Formatted) else repr(obj))

    return callback


def default_registry(
    options: Optional[DisplayOptions] = None,
    renderer: Optional[SceneRenderer] = None,
) -> FormatterRegistry:
    """Registry with the scene, bitmap, complex and array formatters."""
    options = get_options(options)
    return FormatterRegistry(
        [
            HtmlSceneFormatter(options=options, renderer=renderer),
            HtmlBitmapFormatter(options=options),
            PlainTextComplexFormatter(),
            PlainTextArrayFormatter(options=options),
        ]
    )
