"""Save scenes to SVG, PNG and TikZ/PGF files."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from matplotlib.figure import Figure

from .display_config import DisplayOptions, get_options
from .exceptions import InvalidArgumentError
from .rendering import write_figure

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

MM_PER_INCH = 25.4


def _target_path(file_path: Optional[PathLike], suffix: str) -> Path:
    if file_path is None or str(file_path) == "":
        raise InvalidArgumentError("Argument 'file_path' must not be empty.")
    return Path(file_path).with_suffix(suffix)


def save_as_svg(
    scene: Figure,
    file_path: PathLike,
    size: Optional[Tuple[int, int]] = None,
    options: Optional[DisplayOptions] = None,
) -> Path:
    """Save the scene as an SVG file.

    Args:
        scene: The figure to save
        file_path: Target path; the extension is replaced by ``.svg``
        size: (width, height) in pixels, defaults to the display size

    Returns:
        The path written
    """
    path = _target_path(file_path, ".svg")
    size = size or get_options(options).size
    write_figure(scene, path, size, "svg")

    logger.info("Scene saved as SVG at '%s'.", path)
    return path


def save_as_png(
    scene: Figure,
    file_path: PathLike,
    size: Optional[Tuple[int, int]] = None,
    dpi: int = 300,
    options: Optional[DisplayOptions] = None,
) -> Path:
    """Save the scene as a PNG file.

    The image keeps the requested pixel size; ``dpi`` only sets the
    resolution recorded in the file.
    """
    path = _target_path(file_path, ".png")
    if dpi <= 0:
        raise InvalidArgumentError("Argument 'dpi' must be positive.")
    size = size or get_options(options).size
    write_figure(scene, path, size, "png", dpi=dpi)

    logger.info("Scene saved as PNG at '%s'.", path)
    return path


def save_as_tikz(
    scene: Figure,
    file_path: PathLike,
    size_mm: Optional[Tuple[float, float]] = None,
    ppmm: float = 10.0,
    options: Optional[DisplayOptions] = None,
) -> Path:
    """Save the scene as a TikZ/PGF picture for inclusion in LaTeX documents.

    Args:
        scene: The figure to save
        file_path: Target path; the extension is replaced by ``.tikz``
        size_mm: (width, height) in millimetres. Defaults to the display
            size divided by ``ppmm`` (800 px -> 80 mm)
        ppmm: Pixels per millimetre used for the default size

    Returns:
        The path written

    Note:
        The PGF backend measures text with a LaTeX installation
        (``pgf.texsystem``, xelatex by default).
    """
    path = _target_path(file_path, ".tikz")
    if ppmm <= 0:
        raise InvalidArgumentError("Argument 'ppmm' must be positive.")
    if size_mm is None:
        width, height = get_options(options).size
        size_mm = (int(width / ppmm), int(height / ppmm))

    # Work in points: one pixel per point at 72 dpi
    dpi = 72.0
    size = (size_mm[0] / MM_PER_INCH * dpi, size_mm[1] / MM_PER_INCH * dpi)
    write_figure(scene, path, size, "pgf", dpi=dpi)

    logger.info("Scene saved as TIKZ at '%s'.", path)
    return path
