"""Formatter abstraction and typed format results."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple, Union

HTML_MIME_TYPE = "text/html"
PLAIN_TEXT_MIME_TYPE = "text/plain"


@dataclass(frozen=True)
class Formatted:
    """The formatter produced output for the instance."""
    text: str


@dataclass(frozen=True)
class Declined:
    """The formatter does not handle the instance."""
    reason: str


FormatResult = Union[Formatted, Declined]


class TypeFormatter(ABC):
    """Formats instances of specific runtime types for one MIME type.

    Subclasses set ``mime_type`` and ``types`` and implement ``write``.
    """

    mime_type: str = PLAIN_TEXT_MIME_TYPE
    types: Tuple[type, ...] = ()

    def format(self, instance: Any) -> FormatResult:
        """Format an instance, declining if its type is not handled."""
        if not isinstance(instance, self.types):
            return Declined(f"{type(self).__name__} does not handle {type(instance).__name__}")
        return Formatted(self.write(instance))

    @abstractmethod
    def write(self, instance: Any) -> str:
        """Produce the formatted text for an instance of a handled type."""
        pass
