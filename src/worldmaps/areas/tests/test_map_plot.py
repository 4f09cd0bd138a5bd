"""pytests for worldmaps.areas.map_plot.py"""

import os

import cartopy.crs as ccrs  # type: ignore
import matplotlib
import matplotlib.patches as mpatches
import numpy as np
import pytest
from matplotlib import pyplot as plt

from worldmaps.areas.map_plot import Worldplot
from worldmaps.gridded.gridded import read_gridded_netcdf
from worldmaps.legends.discrete_colorbar import ConfigurationError, LegendConfig

matplotlib.use("Agg")

# Natural Earth features are downloaded on first use, so are switched off
# except in tests marked requires_external_data
NO_FEATURES = {
    "draw_coastlines": False,
    "draw_borders": False,
    "draw_ocean": False,
    "land_color": None,
}

BREAKS = [-np.inf, 32.0, 36.0, 40.0, 44.0, np.inf]
COLORS = ["navy", "blue", "yellow", "orange", "red", "darkred"]


@pytest.fixture(name="med_dataset")
def fixture_med_dataset() -> dict:
    """1 degree field over the Mediterranean"""
    lats = np.arange(30.5, 46.0, 1.0)
    lons = np.arange(-5.5, 37.0, 1.0)
    vals = np.add.outer(lats, lons / 10.0)
    vals[0, 0] = np.nan
    return {"lats": lats, "lons": lons, "vals": vals, "name": "sst", "units": "degC"}


@pytest.mark.parametrize(
    "area,projection",
    [
        ("global", ccrs.Robinson),
        ("global_platecarree", ccrs.PlateCarree),
        ("europe", ccrs.LambertConformal),
        ("north_atlantic", ccrs.Mercator),
        ("arctic", ccrs.NorthPolarStereo),
        ("antarctic", ccrs.SouthPolarStereo),
    ],
)
def test_get_projection(area, projection):
    """area projection names map to cartopy projections"""
    assert isinstance(Worldplot(area).get_projection(), projection)


def test_plot_grid_saves_file(med_dataset, tmp_path):
    """plot is saved with a default name built from dataset and area names"""
    plot_file = Worldplot("mediterranean", NO_FEATURES).plot_grid(
        med_dataset, BREAKS, COLORS, output_dir=str(tmp_path)
    )

    assert plot_file == os.path.join(str(tmp_path), "sst_mediterranean.png")
    assert os.path.isfile(plot_file)
    assert os.path.getsize(plot_file) > 0


def test_plot_grid_output_file_extension(med_dataset, tmp_path):
    """.png is added to output file names without an extension"""
    plot_file = Worldplot("mediterranean", NO_FEATURES).plot_grid(
        med_dataset, BREAKS, COLORS, output_dir=str(tmp_path), output_file="med_sst", dpi=50
    )

    assert plot_file == os.path.join(str(tmp_path), "med_sst.png")
    assert os.path.isfile(plot_file)


def test_plot_grid_returns_figure(med_dataset):
    """with no output path the figure is returned with a map and a legend axis"""
    fig = Worldplot("mediterranean", NO_FEATURES).plot_grid(med_dataset, BREAKS, COLORS)

    try:
        assert len(fig.axes) == 2
        map_ax, legend_ax = fig.axes
        assert map_ax.get_title() == "sst : Mediterranean Sea"

        # 4 finite bins + 2 triangles
        assert len(legend_ax.patches) == 6
        polys = [p for p in legend_ax.patches if isinstance(p, mpatches.Polygon)]
        assert len(polys) == 2

        # horizontal legend sits below the map
        assert legend_ax.get_position().y1 <= map_ax.get_position().y0
        title = [t for t in legend_ax.texts if t.get_text() == "sst (degC)"]
        assert len(title) == 1
    finally:
        plt.close(fig)


def test_plot_grid_vertical_legend(med_dataset):
    """vertical legend sits to the right of the map"""
    fig = Worldplot("mediterranean", {**NO_FEATURES, "legend_direction": "vertical"}).plot_grid(
        med_dataset, BREAKS, COLORS, title=""
    )

    try:
        map_ax, legend_ax = fig.axes
        assert legend_ax.get_position().x0 >= map_ax.get_position().x1
        assert map_ax.get_title() == ""
    finally:
        plt.close(fig)


def test_plot_grid_legend_config(med_dataset):
    """an explicit legend config overrides the area legend settings"""
    fig = Worldplot("mediterranean", NO_FEATURES).plot_grid(
        med_dataset,
        BREAKS,
        COLORS,
        legend_config=LegendConfig(title="Sea surface temperature", direction="vertical"),
    )

    try:
        map_ax, legend_ax = fig.axes
        assert legend_ax.get_position().x0 >= map_ax.get_position().x1
        assert "Sea surface temperature" in [t.get_text() for t in legend_ax.texts]
    finally:
        plt.close(fig)


def test_plot_grid_default_colors(med_dataset):
    """colors default to the area colormap, one per finite bin"""
    fig = Worldplot("mediterranean", NO_FEATURES).plot_grid(med_dataset, BREAKS)

    try:
        legend_ax = fig.axes[1]
        assert len(legend_ax.patches) == 6
    finally:
        plt.close(fig)


def test_plot_grid_bad_colors_draw_nothing(med_dataset):
    """bad legend input is rejected before a figure is created"""
    n_figs = len(plt.get_fignums())

    with pytest.raises(ConfigurationError) as excinfo:
        Worldplot("mediterranean", NO_FEATURES).plot_grid(med_dataset, BREAKS, COLORS[:3])

    assert excinfo.value.field == "colors"
    assert len(plt.get_fignums()) == n_figs


def test_plot_grid_from_table(sample_netcdf, tmp_path):
    """a polars table read from NetCDF can be plotted directly"""
    df = read_gridded_netcdf(sample_netcdf, "sst")

    plot_file = Worldplot("global_platecarree", NO_FEATURES).plot_grid(
        {"df": df, "name": "sst", "units": "degC"},
        [-90.0, -45.0, 0.0, 45.0, 90.0],
        ["navy", "skyblue", "orange", "darkred"],
        output_dir=str(tmp_path),
    )

    assert os.path.isfile(plot_file)


@pytest.mark.requires_external_data
def test_plot_grid_with_map_features(med_dataset, tmp_path):
    """coastlines, borders and ocean from Natural Earth are drawn"""
    plot_file = Worldplot("mediterranean").plot_grid(
        med_dataset, BREAKS, COLORS, output_dir=str(tmp_path)
    )

    assert os.path.isfile(plot_file)
