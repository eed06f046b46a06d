import numpy as np
import pytest
from matplotlib.figure import Figure

from nbscene import plot, plot_positions, surf, surf_function, surf_positions
from nbscene.display_config import DisplayOptions
from nbscene.exceptions import InvalidArgumentError
from nbscene.plots import quick_line, quick_surface


@pytest.fixture
def no_figures(monkeypatch):
    """Fail the test if a figure gets constructed."""

    def forbidden():
        raise AssertionError("a scene was constructed")

    monkeypatch.setattr(quick_line, "Figure", forbidden)
    monkeypatch.setattr(quick_surface, "Figure", forbidden)


# ----------------------------------------------------------------------
# plot
# ----------------------------------------------------------------------


def test_plot_builds_one_line_per_series():
    figure = plot([0, 1, 2], [0, 1, 4], [0, 2, 8])

    assert isinstance(figure, Figure)
    ax = figure.get_axes()[0]
    assert len(ax.get_lines()) == 2
    assert ax.get_xlabel() == "X Axis"
    assert ax.get_ylabel() == "Y Axis"
    assert ax.get_legend() is None


def test_plot_mismatched_lengths_rejected_before_scene(no_figures):
    with pytest.raises(InvalidArgumentError):
        plot(x=[0, 1, 2], y1=[0, 1, 4], y2=[0, 1])


def test_plot_none_x_rejected(no_figures):
    with pytest.raises(InvalidArgumentError):
        plot(None, [0, 1])


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        plot(None, [0, 1])


def test_plot_matrix_x_rejected(no_figures):
    with pytest.raises(InvalidArgumentError):
        plot(np.ones((2, 3)), np.ones(6))


def test_plot_matrix_y_rejected(no_figures):
    with pytest.raises(InvalidArgumentError):
        plot([0, 1, 2, 3], np.ones((2, 2)))


def test_plot_accepts_row_and_column_vectors():
    figure = plot(np.arange(3).reshape(1, 3), np.arange(3).reshape(3, 1))
    assert len(figure.get_axes()[0].get_lines()) == 1


def test_plot_legend_skips_none_labels():
    figure = plot([0, 1], [0, 1], [1, 0], labels=["up", None, "down"])

    legend = figure.get_axes()[0].get_legend()
    assert [text.get_text() for text in legend.get_texts()] == ["up", "down"]


def test_plot_scales_and_labels():
    figure = plot([1, 10], [1, 100], x_scale="log", y_scale="log", x_label="n", y_label="t")

    ax = figure.get_axes()[0]
    assert (ax.get_xscale(), ax.get_yscale()) == ("log", "log")
    assert (ax.get_xlabel(), ax.get_ylabel()) == ("n", "t")


def test_plot_unknown_scale_rejected():
    with pytest.raises(InvalidArgumentError):
        plot([0, 1], [0, 1], x_scale="cubic")


def test_plot_non_numeric_rejected():
    with pytest.raises(InvalidArgumentError):
        plot(["a", "b"], [0, 1])


# ----------------------------------------------------------------------
# plot_positions
# ----------------------------------------------------------------------


def test_plot_positions_2d():
    figure = plot_positions([[0, 1, 2], [0, 1, 4]])
    ax = figure.get_axes()[0]
    assert ax.name == "rectilinear"
    assert list(ax.get_lines()[0].get_ydata()) == [0, 1, 4]


def test_plot_positions_3d():
    figure = plot_positions([[0, 1], [0, 1], [5, 6]])
    assert figure.get_axes()[0].name == "3d"


@pytest.mark.parametrize("positions", [None, [0, 1, 2], np.ones((4, 3))])
def test_plot_positions_rejects_bad_input(positions, no_figures):
    with pytest.raises(InvalidArgumentError):
        plot_positions(positions)


# ----------------------------------------------------------------------
# surf
# ----------------------------------------------------------------------


def test_surf_builds_3d_surface_with_default_view():
    figure = surf(np.arange(12.0).reshape(3, 4))

    ax = figure.get_axes()[0]
    assert ax.name == "3d"
    assert len(ax.collections) == 1
    assert (ax.elev, ax.azim) == (25.0, -50.0)
    assert (ax.get_xlabel(), ax.get_ylabel(), ax.get_zlabel()) == ("X Axis", "Y Axis", "Z Axis")


def test_surf_view_comes_from_options():
    figure = surf(np.ones((2, 2)), options=DisplayOptions(surface_view=(10, 20)))
    ax = figure.get_axes()[0]
    assert (ax.elev, ax.azim) == (10.0, 20.0)


def test_surf_non_matrix_z_rejected(no_figures):
    with pytest.raises(InvalidArgumentError):
        surf(np.ones((2, 2, 2)))


def test_surf_none_z_rejected(no_figures):
    with pytest.raises(InvalidArgumentError):
        surf(None)


def test_surf_vector_z_draws_a_line():
    figure = surf([1, 2, 3])
    ax = figure.get_axes()[0]
    assert len(ax.get_lines()) == 1
    assert len(ax.collections) == 0


def test_surf_coordinate_vectors():
    figure = surf(np.ones((2, 3)), X=[0, 1, 2], Y=[10, 20])
    assert len(figure.get_axes()[0].collections) == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"X": [0, 1]},
        {"Y": [0, 1, 2]},
        {"X": np.ones((3, 2))},
        {"C": np.ones(5)},
    ],
)
def test_surf_mismatched_coordinates_rejected(kwargs, no_figures):
    with pytest.raises(InvalidArgumentError):
        surf(np.ones((2, 3)), **kwargs)


def test_surf_color_data():
    figure = surf(np.ones((3, 3)), C=np.arange(9.0).reshape(3, 3))
    assert len(figure.get_axes()[0].collections) == 1


def test_surf_log_axis_requires_positive_data(no_figures):
    with pytest.raises(InvalidArgumentError):
        surf([[0, 1], [1, 2]], z_scale="log")


def test_surf_log_axis_labels_powers_of_ten():
    figure = surf([[1, 10], [100, 1000]], z_scale="log")
    formatter = figure.get_axes()[0].zaxis.get_major_formatter()
    assert formatter(2.0) == "$10^{2}$"


# ----------------------------------------------------------------------
# surf_positions / surf_function
# ----------------------------------------------------------------------


def test_surf_positions_uses_layers():
    zxy = np.stack([np.ones((2, 3)), np.tile([0, 1, 2], (2, 1)), np.tile([[5], [6]], (1, 3))], axis=2)
    figure = surf_positions(zxy, x_label="x")
    assert figure.get_axes()[0].get_xlabel() == "x"


def test_surf_positions_accepts_plain_matrix():
    assert isinstance(surf_positions(np.ones((2, 2))), Figure)


@pytest.mark.parametrize("zxy", [None, np.ones(4), np.ones((2, 2, 4))])
def test_surf_positions_rejects_bad_shapes(zxy, no_figures):
    with pytest.raises(InvalidArgumentError):
        surf_positions(zxy)


def test_surf_function_samples_grid(monkeypatch):
    captured = {}
    original = quick_surface.surf

    def spy(z, x, y, C=None, **kwargs):
        captured.update(z=z, x=x, y=y, c=C)
        return original(z, x, y, C=C, **kwargs)

    monkeypatch.setattr(quick_surface, "surf", spy)
    surf_function(lambda x, y: x + y, xmin=0, xmax=1, xlen=3, ymin=0, ymax=2, ylen=2, c_func=lambda x, y: x)

    assert captured["z"].shape == (2, 3)
    np.testing.assert_allclose(captured["z"], captured["x"] + captured["y"])
    np.testing.assert_allclose(captured["c"], captured["x"])


@pytest.mark.parametrize(
    "kwargs",
    [{"z_func": None}, {"z_func": lambda x, y: 0, "xlen": 1}, {"z_func": lambda x, y: 0, "c_func": 3}],
)
def test_surf_function_rejects_bad_arguments(kwargs, no_figures):
    with pytest.raises(InvalidArgumentError):
        surf_function(**kwargs)
