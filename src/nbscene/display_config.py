"""Display configuration management.

This module provides the DisplayOptions class holding the settings that
control how scenes are shown in a notebook (display mode, target size,
SVG fallback threshold, surface rotation, array summarization).

A shared instance, ``options``, is what the IPython extension installs.
Formatters keep a reference to the instance they were built with and read
it on every call, so mutating it takes effect on the next displayed value.
"""

import logging
import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .exceptions import InvalidArgumentError, UnknownDisplayModeError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "nbscene.yaml"


class DisplayMode(str, Enum):
    """How a scene is rendered for notebook output."""

    PNG = "png"
    SVG = "svg"
    WEB_PLOTLY = "web_plotly"


def resolve_mode(value: Union[str, DisplayMode]) -> DisplayMode:
    """Coerce a string or DisplayMode into a DisplayMode.

    Raises:
        UnknownDisplayModeError: If the value names no display mode.
    """
    try:
        return DisplayMode(value)
    except ValueError:
        raise UnknownDisplayModeError(
            f"Unknown display mode {value!r}. Choose from: {[m.value for m in DisplayMode]}"
        ) from None


def _as_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Option '{name}' must be a number, got {value!r}.") from None


def _as_int(value: Any, name: str) -> int:
    """Accept ints and numeric strings such as YAML 1.1's "4e6"."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _as_float(value, name)
    if not number.is_integer():
        raise InvalidArgumentError(f"Option '{name}' must be a whole number, got {value!r}.")
    return int(number)


def _pair(value: Any, name: str, convert) -> Tuple[Any, Any]:
    try:
        first, second = value
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Option '{name}' must be a pair of numbers, got {value!r}.") from None
    return convert(first, name), convert(second, name)


@dataclass
class DisplayOptions:
    """Settings for displaying scenes in a notebook.

    Attributes:
        mode: Display mode (raster, vector or interactive web chart)
        size: Target (width, height) in pixels
        svg_size_limit: Byte size above which SVG output falls back to PNG
        surface_view: Default (elevation, azimuth) in degrees for surface plots
        max_array_elements: Arrays with more elements are summarized in plain text
    """

    mode: DisplayMode = DisplayMode.WEB_PLOTLY
    size: Tuple[int, int] = (800, 600)
    svg_size_limit: int = 4 * 1000 * 1000  # 4M bytes
    surface_view: Tuple[float, float] = (25.0, -50.0)
    max_array_elements: int = 50

    def __post_init__(self):
        self.mode = resolve_mode(self.mode)
        width, height = _pair(self.size, "size", _as_int)
        if width <= 0 or height <= 0:
            raise InvalidArgumentError(f"Display size must be positive, got {self.size!r}.")
        self.size = (width, height)
        self.svg_size_limit = _as_int(self.svg_size_limit, "svg_size_limit")
        if self.svg_size_limit < 0:
            raise InvalidArgumentError("svg_size_limit must not be negative.")
        self.max_array_elements = _as_int(self.max_array_elements, "max_array_elements")
        if self.max_array_elements <= 0:
            raise InvalidArgumentError("max_array_elements must be positive.")
        self.surface_view = _pair(self.surface_view, "surface_view", _as_float)

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def update(self, **changes: Any) -> "DisplayOptions":
        """Apply validated changes in place and return self.

        The instance keeps its identity, so formatters holding it see the change.

        Example:
            >>> opts = DisplayOptions()
            >>> opts.update(mode="svg", size=(640, 480)).mode
            <DisplayMode.SVG: 'svg'>
        """
        valid_fields = {f.name for f in fields(self)}
        unknown = set(changes) - valid_fields
        if unknown:
            raise InvalidArgumentError(f"Unknown display options: {sorted(unknown)}")

        # Validate on a copy first so a bad value leaves self untouched
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(changes)
        validated = DisplayOptions(**current)
        for name in changes:
            setattr(self, name, getattr(validated, name))
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DisplayOptions":
        """Create options from a dictionary, ignoring unknown keys."""
        return cls(**_known_options(data))

    def update_from_dict(self, data: Dict[str, Any]) -> "DisplayOptions":
        """Apply the known keys of a dictionary (e.g. a config file section)."""
        return self.update(**_known_options(data))


def _known_options(data: Dict[str, Any]) -> Dict[str, Any]:
    valid_fields = {f.name for f in fields(DisplayOptions)}
    filtered = {}
    for key, value in data.items():
        if key not in valid_fields:
            logger.debug("Ignoring unknown display option %r", key)
            continue
        # YAML has no tuples
        filtered[key] = tuple(value) if isinstance(value, list) else value
    return filtered


def read_display_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Read the ``display`` section of a YAML config file; empty if missing."""
    if not os.path.exists(config_path):
        return {}
    with open(config_path, "r") as f:
        config = yaml.safe_load(f) or {}
    return config.get("display") or {}


def load_display_options(config_path: str = DEFAULT_CONFIG_PATH) -> DisplayOptions:
    """Build DisplayOptions from a YAML config file, using defaults when absent."""
    return DisplayOptions.from_dict(read_display_config(config_path))


options = DisplayOptions()


def get_options(display_options: Optional[DisplayOptions] = None) -> DisplayOptions:
    """Return the given options, or the shared process-wide instance."""
    return display_options if display_options is not None else options
