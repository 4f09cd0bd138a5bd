"""pytests for worldmaps.legends.legend_render.py"""

import matplotlib
import matplotlib.colors as mcolors
import matplotlib.patches as mpatches
import numpy as np
import pytest
from matplotlib import pyplot as plt

from worldmaps.legends.discrete_colorbar import (
    ConfigurationError,
    LegendConfig,
    build_discrete_colorbar,
)
from worldmaps.legends.legend_render import draw_legend_scene, plot_discrete_cbar

matplotlib.use("Agg")


@pytest.fixture(name="legend_ax")
def fixture_legend_ax():
    """empty axis, closed after the test"""
    fig, ax = plt.subplots(figsize=(2, 5))
    yield ax
    plt.close(fig)


def test_draw_scene_artists(legend_ax):
    """one patch per rectangle and triangle, one text per label plus the title"""
    scene = build_discrete_colorbar(
        [-np.inf, 0, 50, 100, np.inf],
        ["navy", "skyblue", "orange", "darkred"],
        LegendConfig(title="SST (degC)"),
    )
    draw_legend_scene(legend_ax, scene)

    rects = [p for p in legend_ax.patches if isinstance(p, mpatches.Rectangle)]
    polys = [p for p in legend_ax.patches if isinstance(p, mpatches.Polygon)]

    assert len(rects) == len(scene.rectangles)
    assert len(polys) == len(scene.triangles) == 2
    assert len(legend_ax.lines) == len(scene.tick_marks)
    assert [t.get_text() for t in legend_ax.texts] == [
        "0.00",
        "50.00",
        "100.00",
        "SST (degC)",
    ]

    # fill colors are passed through unchanged
    assert mcolors.same_color(rects[0].get_facecolor(), "skyblue")
    assert mcolors.same_color(polys[0].get_facecolor(), "navy")
    assert mcolors.same_color(polys[1].get_facecolor(), "darkred")


def test_draw_scene_limits_and_axis_off(legend_ax):
    """view limits come from the scene and the axis frame is hidden"""
    scene = build_discrete_colorbar(
        [0, 1, 2], ["r", "b"], LegendConfig(direction="horizontal", expand_size=0.2)
    )
    draw_legend_scene(legend_ax, scene)

    assert legend_ax.get_xlim() == pytest.approx(scene.xlim)
    assert legend_ax.get_ylim() == pytest.approx(scene.ylim)
    assert not legend_ax.axison


def test_background_patch(legend_ax):
    """a background color adds a full-axes patch behind the bins"""
    scene = build_discrete_colorbar([0, 1, 2], ["r", "b"], LegendConfig(background="lightgrey"))
    draw_legend_scene(legend_ax, scene)

    backgrounds = [p for p in legend_ax.patches if p.get_zorder() == 0]
    assert len(backgrounds) == 1
    assert mcolors.same_color(backgrounds[0].get_facecolor(), "lightgrey")


def test_plot_discrete_cbar_creates_figure(tmp_path):
    """plot_discrete_cbar builds its own figure when no axis is given and can be saved"""
    ax = plot_discrete_cbar(
        [0, 20, 40, 60, 80, 100, np.inf],
        ["#2c7bb6", "#abd9e9", "#ffffbf", "#fdae61", "#d7191c"],
        LegendConfig(title="precip (mm)", direction="horizontal", border_color="k"),
    )
    outfile = tmp_path / "legend.png"
    ax.figure.savefig(outfile)
    plt.close(ax.figure)

    assert outfile.exists()
    assert outfile.stat().st_size > 0


def test_plot_discrete_cbar_fails_before_drawing(legend_ax):
    """a configuration error leaves the axis untouched"""
    with pytest.raises(ConfigurationError):
        plot_discrete_cbar([0, 1, 2], ["r"], ax=legend_ax)

    assert not legend_ax.patches
    assert not legend_ax.texts
