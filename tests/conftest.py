import dataclasses

import matplotlib
import pytest

matplotlib.use("Agg")

import nbscene  # noqa: E402
from nbscene import html_content  # noqa: E402


class FakeChart:
    """Stands in for a plotly figure returned by the interactive exporter."""

    def __init__(self, html="<div class='chart'>chart</div>"):
        self.html = html
        self.to_html_kwargs = None

    def to_html(self, **kwargs):
        self.to_html_kwargs = kwargs
        return self.html


class FakeRenderer:
    """Records render calls and returns canned output."""

    def __init__(self, svg=b"<svg><g/></svg>", png=b"\x89PNG\r\n\x1a\nfake", chart=None):
        self.svg = svg
        self.png = png
        self.chart = chart
        self.calls = []

    def render_png(self, scene, size):
        self.calls.append(("png", size))
        return self.png

    def render_svg(self, scene, size):
        self.calls.append(("svg", size))
        return self.svg

    def export_interactive(self, scene, size):
        self.calls.append(("web_plotly", size))
        return self.chart


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def fixed_element_ids(monkeypatch):
    """Make SVG container ids deterministic."""
    monkeypatch.setattr(html_content, "new_element_id", lambda prefix: prefix + "fixed")


@pytest.fixture
def restore_global_options():
    """Restore the shared nbscene.options after a test mutates it."""
    saved = {f.name: getattr(nbscene.options, f.name) for f in dataclasses.fields(nbscene.options)}
    yield nbscene.options
    nbscene.options.update(**saved)
