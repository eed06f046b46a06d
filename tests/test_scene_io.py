import logging
import shutil

import numpy as np
import pytest
from PIL import Image

from nbscene import plot, save_as_png, save_as_svg, save_as_tikz, scene_io
from nbscene.display_config import DisplayOptions
from nbscene.exceptions import InvalidArgumentError


@pytest.fixture
def scene():
    return plot([0, 1, 2], [0, 1, 4], labels=["squares"])


def test_save_as_svg_replaces_extension(tmp_path, scene):
    path = save_as_svg(scene, tmp_path / "chart.txt", size=(400, 300))

    assert path == tmp_path / "chart.svg"
    content = path.read_text()
    assert "<svg" in content
    # 400 x 300 px at 100 dpi
    assert 'width="288pt" height="216pt"' in content


def test_save_as_svg_adds_missing_extension(tmp_path, scene):
    path = save_as_svg(scene, str(tmp_path / "chart"))
    assert path.suffix == ".svg"
    assert path.exists()


@pytest.mark.parametrize("file_path", [None, ""])
@pytest.mark.parametrize("save", [save_as_svg, save_as_png, save_as_tikz])
def test_empty_path_rejected(file_path, save, scene):
    with pytest.raises(InvalidArgumentError):
        save(scene, file_path)


def test_save_as_png_pixel_size_and_dpi(tmp_path, scene):
    path = save_as_png(scene, tmp_path / "chart.png", size=(400, 300), dpi=200)

    with Image.open(path) as image:
        assert image.size == (400, 300)
        assert image.info["dpi"] == pytest.approx((200, 200), abs=0.5)


def test_save_as_png_uses_display_size(tmp_path, scene):
    path = save_as_png(scene, tmp_path / "chart", dpi=100, options=DisplayOptions(size=(500, 250)))

    with Image.open(path) as image:
        assert image.size == (500, 250)


def test_save_restores_figure_size(tmp_path, scene):
    size_before = scene.get_size_inches().copy()
    dpi_before = scene.get_dpi()

    save_as_png(scene, tmp_path / "chart.png", size=(400, 300), dpi=200)

    np.testing.assert_allclose(scene.get_size_inches(), size_before)
    assert scene.get_dpi() == dpi_before


def test_save_as_png_rejects_bad_dpi(tmp_path, scene):
    with pytest.raises(InvalidArgumentError):
        save_as_png(scene, tmp_path / "chart.png", dpi=0)


def test_save_logs_written_path(tmp_path, scene, caplog):
    with caplog.at_level(logging.INFO, logger="nbscene.scene_io"):
        path = save_as_svg(scene, tmp_path / "chart.svg")

    assert f"Scene saved as SVG at '{path}'." in caplog.text


def test_save_as_tikz_converts_millimetres(tmp_path, scene, monkeypatch):
    written = {}

    def fake_write(figure, target, size, fmt, dpi=None):
        written.update(target=target, size=size, fmt=fmt, dpi=dpi)

    monkeypatch.setattr(scene_io, "write_figure", fake_write)
    path = save_as_tikz(scene, tmp_path / "chart.tex", size_mm=(80, 60))

    assert path == tmp_path / "chart.tikz"
    assert written["target"] == path
    assert written["fmt"] == "pgf"
    assert written["size"] == pytest.approx((80 / 25.4 * 72, 60 / 25.4 * 72))


def test_save_as_tikz_default_size_from_ppmm(tmp_path, scene, monkeypatch):
    written = {}
    monkeypatch.setattr(scene_io, "write_figure", lambda figure, target, size, fmt, dpi=None: written.update(size=size))

    save_as_tikz(scene, tmp_path / "chart", ppmm=10.0, options=DisplayOptions(size=(800, 600)))

    assert written["size"] == pytest.approx((80 / 25.4 * 72, 60 / 25.4 * 72))


def test_save_as_tikz_rejects_bad_ppmm(tmp_path, scene):
    with pytest.raises(InvalidArgumentError):
        save_as_tikz(scene, tmp_path / "chart", ppmm=0)


@pytest.mark.skipif(shutil.which("xelatex") is None, reason="PGF output needs xelatex")
def test_save_as_tikz_writes_pgf_picture(tmp_path, scene):
    path = save_as_tikz(scene, tmp_path / "chart", size_mm=(80, 60))
    assert "\\begin{pgfpicture}" in path.read_text()
