"""worldmaps.areas.map_plot.py
class to plot gridded data on global and regional maps with a discrete color legend
"""

import logging
import os
from typing import Sequence

import cartopy.crs as ccrs  # type: ignore
import cartopy.feature as cfeature  # type: ignore
import numpy as np
from cartopy.mpl.geoaxes import GeoAxes  # type: ignore
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.gridspec import SubplotSpec

from worldmaps.areas.areas import Area
from worldmaps.binning.binning import discrete_cmap_and_norm, get_discrete_colors
from worldmaps.gridded.gridded import table_to_grid
from worldmaps.legends.discrete_colorbar import (
    LegendConfig,
    LegendScene,
    build_discrete_colorbar,
    resolve_bins,
)
from worldmaps.legends.legend_render import draw_legend_scene

# pylint: disable=too-many-arguments
# pylint: disable=too-many-locals

log = logging.getLogger(__name__)

# Natural Earth resolution for each coastline_resolution setting
NATURAL_EARTH_SCALES = {"low": "110m", "medium": "50m", "high": "10m"}


class Worldplot:
    """class to create map plots of gridded data over global or regional areas"""

    def __init__(self, area: str, area_overrides: dict | None = None, area_file: str | None = None):
        """class initialization

        Args:
            area (str): area name as per worldmaps.areas.definitions
            area_overrides (dict|None): dictionary to override area dict definitions
            area_file (str|None): path of an area definition file to use instead
        """
        self.area = area

        self.thisarea = Area(area, area_overrides, area_filename=area_file)

    def get_projection(self) -> ccrs.Projection:
        """Get the cartopy projection for the current area

        Returns:
            ccrs.Projection: map projection
        """
        name = self.thisarea.projection
        central_longitude = self.thisarea.central_longitude

        if name == "PlateCarree":
            return ccrs.PlateCarree(central_longitude=central_longitude)
        if name == "Robinson":
            return ccrs.Robinson(central_longitude=central_longitude)
        if name == "Mercator":
            return ccrs.Mercator(central_longitude=central_longitude)
        if name == "NorthPolarStereo":
            return ccrs.NorthPolarStereo(central_longitude=central_longitude)
        if name == "SouthPolarStereo":
            return ccrs.SouthPolarStereo(central_longitude=central_longitude)
        if name == "LambertConformal":
            if self.thisarea.standard_parallels is not None:
                return ccrs.LambertConformal(
                    central_longitude=central_longitude,
                    standard_parallels=tuple(self.thisarea.standard_parallels),
                )
            return ccrs.LambertConformal(central_longitude=central_longitude)

        raise ValueError(f"projection {name} not supported")

    def setup_projection_and_extent(self, fig: Figure, subplot_spec: SubplotSpec) -> GeoAxes:
        """Setup projection and extent for current Area

        Args:
            fig (Figure): figure to add the map axis to
            subplot_spec (SubplotSpec): position of the map in the figure's gridspec

        Returns:
            GeoAxes: cartopy map axis
        """
        log.info("setup_projection_and_extent..")

        ax = fig.add_subplot(subplot_spec, projection=self.get_projection())

        if self.thisarea.global_extent:
            log.info("Global extent..")
            ax.set_global()
        else:
            log.info("Area extent %s", self.thisarea.extent)
            ax.set_extent(self.thisarea.extent, crs=ccrs.PlateCarree())

        return ax

    def draw_features(self, ax: GeoAxes):
        """draw oceans, land, coastlines and country borders over map

        Args:
            ax (GeoAxes): map axis
        """
        scale = NATURAL_EARTH_SCALES.get(self.thisarea.coastline_resolution)
        if scale is None:
            raise ValueError(
                f"coastline_resolution {self.thisarea.coastline_resolution} not in "
                f"{list(NATURAL_EARTH_SCALES)}"
            )
        data_zorder = self.thisarea.data_zorder

        # Land fill sits below the data, ocean, coastlines and borders over it
        if self.thisarea.land_color is not None:
            ax.add_feature(
                cfeature.LAND.with_scale(scale),
                facecolor=self.thisarea.land_color,
                zorder=data_zorder - 1,
            )
        if self.thisarea.draw_ocean:
            ax.add_feature(
                cfeature.OCEAN.with_scale(scale),
                facecolor=self.thisarea.ocean_color,
                zorder=data_zorder + 1,
            )
        if self.thisarea.draw_coastlines:
            ax.add_feature(
                cfeature.COASTLINE.with_scale(scale),
                edgecolor=self.thisarea.coastline_color,
                linewidth=0.6,
                zorder=data_zorder + 2,
            )
        if self.thisarea.draw_borders:
            ax.add_feature(
                cfeature.BORDERS.with_scale(scale),
                edgecolor=self.thisarea.border_color,
                linewidth=0.4,
                zorder=data_zorder + 2,
            )

    def draw_gridlines(self, ax: GeoAxes):
        """draw lat/lon grid lines (and labels if set in area definition)

        Args:
            ax (GeoAxes): map axis
        """
        if not self.thisarea.show_gridlines:
            return

        gl = ax.gridlines(
            crs=ccrs.PlateCarree(),
            draw_labels=self.thisarea.draw_gridlabels,
            color=self.thisarea.gridline_color,
            linewidth=0.5,
            linestyle="--",
            zorder=self.thisarea.data_zorder + 3,
        )
        if self.thisarea.draw_gridlabels:
            gl.top_labels = False
            gl.right_labels = False
            gl.xlabel_style = {"size": self.thisarea.gridlabel_size}
            gl.ylabel_style = {"size": self.thisarea.gridlabel_size}

    def plot_data(
        self,
        ax: GeoAxes,
        lons: np.ndarray,
        lats: np.ndarray,
        vals: np.ndarray,
        breaks: Sequence[float],
        colors: Sequence,
        reverse: bool = False,
    ):
        """plot gridded vals on map, binned into discrete colors

        Args:
            ax (GeoAxes): the main plot axis
            lons (np.ndarray): 1-D longitudes of grid columns
            lats (np.ndarray): 1-D latitudes of grid rows
            vals (np.ndarray): values, shape (len(lats), len(lons))
            breaks (Sequence[float]): bin boundaries
            colors (Sequence): bin colors
            reverse (bool): reverse the color order

        Returns:
            QuadMesh: the plotted mesh
        """
        cmap, norm = discrete_cmap_and_norm(breaks, colors, reverse=reverse)

        masked_vals = np.ma.masked_invalid(vals)
        if masked_vals.count() == 0:
            log.error("Error: Requested a plot with entirely NaN data")

        mesh = ax.pcolormesh(
            lons,
            lats,
            masked_vals,
            cmap=cmap,
            norm=norm,
            shading="nearest",
            transform=ccrs.PlateCarree(),
            zorder=self.thisarea.data_zorder,
        )
        return mesh

    def make_legend_config(self, dataset: dict, legend_config: LegendConfig | None) -> LegendConfig:
        """Get the legend settings for a dataset: legend_config if given, otherwise
        built from the area's legend settings and the dataset's name and units.

        Args:
            dataset (dict): the data set dict
            legend_config (LegendConfig|None): explicit legend settings

        Returns:
            LegendConfig: legend settings
        """
        if legend_config is not None:
            return legend_config

        title = dataset.get("name", "")
        units = dataset.get("units", "")
        if units:
            title = f"{title} ({units})" if title else f"({units})"

        return LegendConfig(
            title=title,
            direction=self.thisarea.legend_direction,
            spacing=self.thisarea.legend_spacing,
            expand_size=self.thisarea.legend_expand_size,
            bar_width=self.thisarea.legend_bar_width,
            font_size=self.thisarea.legend_font_size,
            border_color=self.thisarea.legend_border_color,
        )

    def draw_legend(self, fig: Figure, subplot_spec: SubplotSpec, scene: LegendScene) -> Axes:
        """draw the discrete legend in its own panel

        Args:
            fig (Figure): the plot figure
            subplot_spec (SubplotSpec): position of the legend panel in the figure's gridspec
            scene (LegendScene): legend scene to draw

        Returns:
            Axes: legend axis
        """
        legend_ax = fig.add_subplot(subplot_spec)

        return draw_legend_scene(legend_ax, scene)

    def plot_grid(
        self,
        dataset: dict,
        breaks: Sequence[float],
        colors: Sequence | None = None,
        legend_config: LegendConfig | None = None,
        output_dir: str = "",
        output_file: str = "",
        dpi: int | None = None,
        title: str | None = None,
        transparent_background: bool = False,
    ) -> str | Figure:
        """
        Plot a gridded dataset on the area map with a discrete color legend beside it.

        ### Parameters

        - `dataset` (dict): Structure:
          ```python
          {
              "lats": np.array([]),     # 1-D latitudes of grid rows (or use "df")
              "lons": np.array([]),     # 1-D longitudes of grid columns
              "vals": np.array([]),     # 2-D values, shape (len(lats), len(lons))
              "df": pl.DataFrame,       # Optional: long table (latitude, longitude, value)
              "name": "unnamed",        # Optional: Name of dataset
              "units": "",              # Optional: Units of `vals`
              "cmap_name": "RdYlBu_r",  # Optional: colormap used when colors is None
          }
          ```
        - `breaks` (Sequence[float]): bin boundaries. First may be -inf, last may be +inf.
        - `colors` (Sequence|None): bin colors. If None, sampled from the dataset or area
          colormap (one per finite bin).
        - `legend_config` (LegendConfig|None): legend settings. If None built from the
          area's legend settings, with title from dataset name and units.
        - `output_dir`, `output_file` (str): where to save the plot. If neither is set
          the figure is returned without saving.
        - `dpi` (int|None): output resolution. Default from area definition.
        - `title` (str|None): map title. Default is dataset name + area long name.
        - `transparent_background` (bool): save with a transparent background.

        ### Returns

        str | Figure: path of saved plot, or the figure if not saved

        ### Raises

        ConfigurationError: if breaks, colors or legend settings are invalid. Raised
        before anything is drawn.
        """
        if "df" in dataset:
            lons, lats, vals = table_to_grid(dataset["df"])
        else:
            lons = np.asarray(dataset["lons"], dtype=float)
            lats = np.asarray(dataset["lats"], dtype=float)
            vals = np.asarray(dataset["vals"], dtype=float)

        ds_name = dataset.get("name", "unnamed")

        if colors is None:
            n_bins = resolve_bins(breaks, ["k"] * (len(breaks) - 1)).n_bins
            colors = get_discrete_colors(
                n_bins, dataset.get("cmap_name", self.thisarea.cmap_name)
            )

        config = self.make_legend_config(dataset, legend_config)

        # build the legend first so bad inputs fail before any drawing
        scene = build_discrete_colorbar(breaks, colors, config)

        fig = plt.figure(figsize=self.thisarea.figsize, facecolor=self.thisarea.background_color)

        map_ratio = self.thisarea.map_width_ratio
        legend_ratio = self.thisarea.legend_width_ratio
        if config.direction == "vertical":
            gs = fig.add_gridspec(1, 2, width_ratios=[map_ratio, legend_ratio], wspace=0.05)
            map_spec, legend_spec = gs[0, 0], gs[0, 1]
        else:
            gs = fig.add_gridspec(2, 1, height_ratios=[map_ratio, legend_ratio], hspace=0.1)
            map_spec, legend_spec = gs[0, 0], gs[1, 0]

        ax = self.setup_projection_and_extent(fig, map_spec)
        self.plot_data(ax, lons, lats, vals, breaks, colors, reverse=config.reverse)
        self.draw_features(ax)
        self.draw_gridlines(ax)

        if title is None:
            title = f"{ds_name} : {self.thisarea.long_name}"
        if title:
            ax.set_title(title, fontsize=self.thisarea.title_fontsize)

        self.draw_legend(fig, legend_spec, scene)

        if not (output_dir or output_file):
            return fig

        if output_dir and output_file:
            plot_filename = os.path.join(output_dir, output_file)
        elif output_file:
            plot_filename = output_file
        else:
            _ds_name = ds_name.replace("/", "_").replace(" ", "_")
            plot_filename = os.path.join(output_dir, f"{_ds_name}_{self.thisarea.name}.png")

        if not os.path.splitext(plot_filename)[1]:
            plot_filename += ".png"

        if dpi is None:
            dpi = self.thisarea.dpi
        log.info("Saving plot to %s at %d dpi", plot_filename, dpi)
        fig.savefig(plot_filename, dpi=dpi, transparent=transparent_background)
        plt.close(fig)

        return plot_filename
