import math

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

import utils
from plot import create_cartesian_plot, create_polar_plot
from point import CoordinatePoint


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_empty_point_list_is_not_plotted():
    assert create_cartesian_plot([], show=False) is None
    assert create_polar_plot([], show=False) is None


def test_cartesian_plot():
    pts = [CoordinatePoint.from_rectangular(0, 1), CoordinatePoint.from_polar(math.pi / 4, 2)]
    fig = create_cartesian_plot(pts, show=False)
    ax = fig.axes[0]
    assert ax.get_title() == "Point in Rectangular Coordinates"
    # one segment line between the two points
    assert len(ax.get_lines()) == 1


def test_polar_plot_skips_nan_rho_when_sizing():
    pts = [CoordinatePoint.from_rectangular(5, 0), CoordinatePoint.from_polar(math.pi / 2, 2)]
    assert math.isnan(pts[0].rho)
    fig = create_polar_plot(pts, show=False)
    ax = fig.axes[0]
    assert ax.name == "polar"
    assert ax.get_rmax() == pytest.approx(2.2)


def test_polar_plot_warns_about_non_finite_points(monkeypatch, capsys):
    monkeypatch.setattr(utils, "COLOR_OUTPUT", False)
    pts = [CoordinatePoint.from_rectangular(0, 0), CoordinatePoint.from_polar(0.5, 1)]
    create_polar_plot(pts, show=False)
    assert "WARNING: 1 point(s) with non-finite theta or rho" in capsys.readouterr().out

    create_polar_plot([CoordinatePoint.from_polar(0.5, 1)], show=False)
    assert "WARNING" not in capsys.readouterr().out
