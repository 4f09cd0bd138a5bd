"""worldmaps.areas.areas.py: Area class to define global and regional map areas"""

import glob
import importlib
import importlib.util
import logging
import os
import sys

import numpy as np
import polars as pl

# pylint: disable=too-many-statements
# pylint: disable=too-many-instance-attributes

log = logging.getLogger(__name__)

AREA_DEFINITION_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "definitions")

SUPPORTED_PROJECTIONS = (
    "PlateCarree",
    "Robinson",
    "Mercator",
    "NorthPolarStereo",
    "SouthPolarStereo",
    "LambertConformal",
)


def _definition_names() -> list[str]:
    if not os.path.isdir(AREA_DEFINITION_DIR):
        raise FileNotFoundError(f"{AREA_DEFINITION_DIR} not found")

    all_defs = glob.glob(f"{AREA_DEFINITION_DIR}/*.py")
    return [
        os.path.basename(thisdef).replace(".py", "")
        for thisdef in all_defs
        if "__init__" not in thisdef
    ]


def list_all_area_definition_names(logger=None) -> list[str]:
    """return a list of all area definition names and some additional
    info on each.

    Returns:
        list[str]: sorted list of 'name : long_name : [minlon,maxlon,minlat,maxlat]'
    """

    if logger is None:
        logger = logging.getLogger()

    original_level = logger.level
    logger.setLevel(logging.ERROR)

    blue = "\033[0;34m"
    green = "\033[0;32m"
    endc = "\033[0m"  # Reset to default color

    try:
        final_defs = []
        for thisdef in _definition_names():
            thisarea = Area(thisdef)
            color = blue if thisarea.global_extent else green
            final_defs.append(
                f"{color}{thisdef}{endc} : {thisarea.long_name} :"
                f" [{thisarea.minlon},{thisarea.maxlon},{thisarea.minlat},{thisarea.maxlat}]"
            )
        return sorted(final_defs)

    finally:
        logger.setLevel(original_level)


def list_all_area_definition_names_only(logger=None) -> list[str]:
    """return a list of all area definition names (only the names)

    Returns:
        list[str]
    """

    if logger is None:
        logger = logging.getLogger()

    original_level = logger.level
    logger.setLevel(logging.ERROR)

    try:
        final_defs = []
        for thisdef in _definition_names():
            _ = Area(thisdef)
            final_defs.append(thisdef)
        return sorted(final_defs)

    finally:
        logger.setLevel(original_level)


def import_module_from_file(file_path):
    """Imports a Python module from a specified file path.

    The module name is derived from the file name, excluding its extension
    and directory path. The module is also added to `sys.modules`.

    Args:
        file_path (str): The file path to the Python module to be imported.

    Raises:
        ImportError: If the module cannot be imported.

    Returns:
        tuple: (module, module_name)
    """
    module_name = os.path.splitext(os.path.basename(file_path))[0]

    spec = importlib.util.spec_from_file_location(module_name, file_path)
    if spec and spec.loader:
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module, module_name

    raise ImportError(f"Cannot import module from file path: {file_path}")


class Area:
    """class to define global and regional map areas for plotting"""

    def __init__(self, name: str, overrides: dict | None = None, area_filename: str | None = None):
        """class initialization

        Args:
            name (str): area name, as in worldmaps.areas.definitions
            overrides (dict|None): dictionary to override any parameters in area definition dicts
            area_filename (str|None): path of an area definition file to use instead of
                                      the standard definitions
        """

        self.name = name

        try:
            self.load_area(overrides, area_filename)
        except ImportError as exc:
            raise ImportError(f"{name} not in supported area list") from exc

        self.check_bounds()

    def load_area(self, overrides: dict | None = None, area_filename: str | None = None):
        """Load area settings for current area name"""

        log.info("loading area -%s-", self.name)

        if area_filename is None:
            try:
                module = importlib.import_module(f"worldmaps.areas.definitions.{self.name}")
            except ImportError as exc:
                raise ImportError(f"Could not load area definition: {self.name}") from exc
        else:
            module, self.name = import_module_from_file(area_filename)

        area_definition = module.area_definition.copy()

        secondary_area_name = area_definition.get("use_definitions_from", None)
        while secondary_area_name is not None:
            if "use_definitions_from" in area_definition:
                del area_definition["use_definitions_from"]
            log.info("loading secondary area %s", secondary_area_name)
            try:
                module2 = importlib.import_module(
                    f"worldmaps.areas.definitions.{secondary_area_name}"
                )
            except ImportError as exc:
                raise ImportError(f"Could not load area definition: {secondary_area_name}") from exc
            area_definition2 = module2.area_definition.copy()
            secondary_area_name = area_definition2.get("use_definitions_from", None)
            if "use_definitions_from" in area_definition2:
                del area_definition2["use_definitions_from"]
            area_definition2.update(area_definition)
            area_definition = area_definition2

        if overrides is not None and isinstance(overrides, dict):
            area_definition.update(overrides)

        # store parameters from the area definition dict in class variables
        self.long_name = area_definition["long_name"]
        self.area_summary = area_definition.get("area_summary", "")

        # Bounding box
        self.global_extent = area_definition.get("global_extent", False)
        self.minlon = area_definition.get("minlon", -180.0)
        self.maxlon = area_definition.get("maxlon", 180.0)
        self.minlat = area_definition.get("minlat", -90.0)
        self.maxlat = area_definition.get("maxlat", 90.0)

        # Projection
        self.projection = area_definition.get("projection", "PlateCarree")
        self.central_longitude = area_definition.get("central_longitude", 0.0)
        self.standard_parallels = area_definition.get("standard_parallels", None)

        # Map features
        self.draw_coastlines = area_definition.get("draw_coastlines", True)
        self.coastline_color = area_definition.get("coastline_color", "grey")
        self.coastline_resolution = area_definition.get("coastline_resolution", "medium")
        self.draw_borders = area_definition.get("draw_borders", True)
        self.border_color = area_definition.get("border_color", "darkgrey")
        self.draw_ocean = area_definition.get("draw_ocean", True)
        self.ocean_color = area_definition.get("ocean_color", "#dfeefa")
        self.land_color = area_definition.get("land_color", None)
        self.data_zorder = area_definition.get("data_zorder", 2)
        self.show_gridlines: bool = area_definition.get("show_gridlines", True)
        self.gridline_color: str = area_definition.get("gridline_color", "lightgrey")
        self.draw_gridlabels = area_definition.get("draw_gridlabels", True)
        self.gridlabel_size = area_definition.get("gridlabel_size", 8)

        # Figure
        self.figsize = tuple(area_definition.get("figsize", (12, 6)))
        self.dpi = area_definition.get("dpi", 100)
        self.background_color = area_definition.get("background_color", "white")
        self.title_fontsize = area_definition.get("title_fontsize", 12)

        # Discrete legend layout
        self.legend_direction = area_definition.get("legend_direction", "vertical")
        self.map_width_ratio = area_definition.get("map_width_ratio", 6)
        self.legend_width_ratio = area_definition.get("legend_width_ratio", 1)
        self.legend_bar_width = area_definition.get("legend_bar_width", 0.05)
        self.legend_expand_size = area_definition.get("legend_expand_size", 0.1)
        self.legend_font_size = area_definition.get("legend_font_size", 9)
        self.legend_spacing = area_definition.get("legend_spacing", "constant")
        self.legend_border_color = area_definition.get("legend_border_color", None)

        # Default colormap for data (can be overridden in dataset dicts)
        self.cmap_name = area_definition.get("cmap_name", "RdYlBu_r")

    def check_bounds(self):
        """Check the area's lat/lon bounding box and projection

        Raises:
            ValueError: if bounds are out of range or inverted, or projection unsupported
        """
        if not -180.0 <= self.minlon < self.maxlon <= 180.0:
            raise ValueError(
                f"area {self.name}: need -180 <= minlon < maxlon <= 180, "
                f"got minlon={self.minlon}, maxlon={self.maxlon}"
            )
        if not -90.0 <= self.minlat < self.maxlat <= 90.0:
            raise ValueError(
                f"area {self.name}: need -90 <= minlat < maxlat <= 90, "
                f"got minlat={self.minlat}, maxlat={self.maxlat}"
            )
        if self.projection not in SUPPORTED_PROJECTIONS:
            raise ValueError(f"area {self.name}: projection {self.projection} not supported")

    @property
    def extent(self) -> list[float]:
        """[minlon, maxlon, minlat, maxlat] as used by cartopy's set_extent()"""
        return [self.minlon, self.maxlon, self.minlat, self.maxlat]

    def inside_latlon_bounds(
        self, lats: np.ndarray, lons: np.ndarray
    ) -> tuple[np.ndarray, int]:
        """find if input latitude and longitude locations are inside area's lat/lon extent
           bounds

        Args:
            lats (np.ndarray): array of latitude values (degs N)
            lons (np.ndarray): array of longitude values (degs E, -180..180)

        Returns:
            (bool_mask, n_inside): boolean array True where inside, number inside
        """
        lats = np.atleast_1d(lats)
        lons = np.atleast_1d(lons)

        in_lat_area = np.logical_and(lats >= self.minlat, lats <= self.maxlat)
        in_lon_area = np.logical_and(lons >= self.minlon, lons <= self.maxlon)
        bool_mask = in_lat_area & in_lon_area

        return bool_mask, int(np.count_nonzero(bool_mask))

    #########################################################
    # Functions to work with Polars DataFrames or LazyFrames #
    #########################################################

    def inside_latlon_bounds_polars(
        self, df: pl.DataFrame | pl.LazyFrame, lat_col: str, lon_col: str, return_pl_dataframe=False
    ) -> pl.DataFrame | pl.LazyFrame:
        """
        Filter polars DataFrame or LazyFrame to only include rows within the area's lat/lon bounds.

        Args:
            df (pl.DataFrame|pl.LazyFrame): Polars DataFrame or LazyFrame containing lat/lon data
            lat_col (str): name of latitude column in df
            lon_col (str): name of longitude column in df
            return_pl_dataframe (bool): if True and input is LazyFrame, return a DataFrame
        Returns:
            pl.DataFrame|pl.LazyFrame: filtered DataFrame or LazyFrame with only rows inside bounds
        """

        df = df.filter(
            (pl.col(lat_col) >= self.minlat)
            & (pl.col(lat_col) <= self.maxlat)
            & (pl.col(lon_col) >= self.minlon)
            & (pl.col(lon_col) <= self.maxlon)
        )

        return df.collect() if (isinstance(df, pl.LazyFrame) and return_pl_dataframe) else df
