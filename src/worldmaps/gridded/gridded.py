"""worldmaps.gridded.gridded.py

Read gridded geophysical fields from NetCDF files into a polars table of
(latitude, longitude, value) rows, clip them to an area's bounding box and
convert them back to a 2-D grid for plotting.

Example:

```
from worldmaps.areas.areas import Area
from worldmaps.gridded.gridded import clip_to_area, read_gridded_netcdf, table_to_grid

df = read_gridded_netcdf("sst_2020_01.nc", "analysed_sst")
df = clip_to_area(df, Area("mediterranean"))
lons, lats, vals = table_to_grid(df)
```
"""

import logging
import os

import numpy as np
import polars as pl
from netCDF4 import Dataset, Variable  # pylint: disable=E0611

from worldmaps.areas.areas import Area

log = logging.getLogger(__name__)

LAT_NAMES = ("lat", "latitude", "nav_lat", "y")
LON_NAMES = ("lon", "longitude", "nav_lon", "x")

LAT_COL = "latitude"
LON_COL = "longitude"
VAL_COL = "value"

# table_to_grid() rejects tables filling less than 1/MAX_GRID_CELLS_PER_ROW of the grid
MAX_GRID_CELLS_PER_ROW = 4


def get_variable(nc: Dataset, nc_var_path: str) -> Variable:
    """Retrieve variable from NetCDF file, handling groups if necessary.

    Args:
        nc (Dataset): The NetCDF dataset object.
        nc_var_path (str): The path to the variable within the NetCDF file,
                        with groups separated by '/'.

    Returns:
        Variable: The retrieved NetCDF variable.

    Raises:
        KeyError: If the variable or group is not found in the NetCDF file.
    """
    parts = nc_var_path.split("/")
    var = nc
    for part in parts:
        try:
            var = var[part]
        except (KeyError, IndexError) as exc:
            raise KeyError(f"NetCDF parameter '{nc_var_path}' not found") from exc
    return var


def find_coordinate_name(nc: Dataset, candidates: tuple[str, ...]) -> str:
    """Find the first of a list of candidate coordinate names in a NetCDF file

    Args:
        nc (Dataset): The NetCDF dataset object.
        candidates (tuple[str]): names to try, in order

    Returns:
        str: the name found

    Raises:
        KeyError: if none of the candidates are in the file
    """
    for name in candidates:
        if name in nc.variables:
            return name
    raise KeyError(f"none of {candidates} found in NetCDF variables")


def read_gridded_netcdf(
    filename: str,
    varname: str,
    lat_name: str | None = None,
    lon_name: str | None = None,
) -> pl.DataFrame:
    """Read a gridded NetCDF variable into a long (latitude, longitude, value) table.

    Fill values and scale/offset are applied by netCDF4's auto mask and scale. Masked
    values become NaN. A leading time dimension of length 1 is squeezed.
    Longitudes are normalized to -180..180.
    Coordinates may be 1-D, or 2-D when they describe a regular lat/lon grid.

    Args:
        filename (str): path of NetCDF file
        varname (str): variable name (may include group path, 'group/var')
        lat_name (str|None): latitude variable name. If None found from LAT_NAMES.
        lon_name (str|None): longitude variable name. If None found from LON_NAMES.

    Returns:
        pl.DataFrame: columns latitude, longitude, value (Float64)

    Raises:
        FileNotFoundError: if filename does not exist
        KeyError: if the variable or coordinates are not found
        ValueError: if the variable is not a 2-D (lat, lon) field, or its 2-D lat/lon
                    coordinates are curvilinear
    """
    if not os.path.isfile(filename):
        log.error("NetCDF file %s not found", filename)
        raise FileNotFoundError(f"NetCDF file {filename} not found")

    log.info("reading %s from %s", varname, filename)

    with Dataset(filename) as nc:
        var = get_variable(nc, varname)
        if lat_name is None:
            lat_name = find_coordinate_name(nc, LAT_NAMES)
        if lon_name is None:
            lon_name = find_coordinate_name(nc, LON_NAMES)

        lats = np.asarray(get_variable(nc, lat_name)[:], dtype=float)
        lons = np.asarray(get_variable(nc, lon_name)[:], dtype=float)
        vals = np.ma.filled(np.ma.asarray(var[:], dtype=float), np.nan)

    vals = np.squeeze(vals)
    if vals.ndim != 2:
        log.error("%s has shape %s, expected a 2-D field", varname, vals.shape)
        raise ValueError(f"{varname} must be 2-D after squeezing, has shape {vals.shape}")

    if lats.ndim == 1 and lons.ndim == 1:
        if vals.shape != (lats.size, lons.size):
            raise ValueError(
                f"{varname} shape {vals.shape} does not match (lat, lon) "
                f"({lats.size}, {lons.size})"
            )
        lon_grid, lat_grid = np.meshgrid(lons, lats)
    elif lats.shape == vals.shape and lons.shape == vals.shape:
        # 2-D coordinates are only accepted when they describe a regular lat/lon grid
        # (latitude constant along rows, longitude constant down columns)
        if not (np.allclose(lats, lats[:, :1]) and np.allclose(lons, lons[:1, :])):
            log.error("%s has curvilinear lat/lon coordinates", varname)
            raise ValueError(
                f"{varname} is on a curvilinear grid (2-D lat/lon vary along both axes). "
                "Only regular lat/lon grids are supported, regrid the data first"
            )
        # use one exact value per row and column so table_to_grid() recovers the grid shape
        lat_grid = np.broadcast_to(lats[:, :1], vals.shape)
        lon_grid = np.broadcast_to(lons[:1, :], vals.shape)
    else:
        raise ValueError(
            f"coordinate shapes {lats.shape}, {lons.shape} do not match {varname} {vals.shape}"
        )

    df = pl.DataFrame(
        {
            LAT_COL: lat_grid.ravel(),
            LON_COL: lon_grid.ravel(),
            VAL_COL: vals.ravel(),
        }
    )

    df = normalise_longitudes(df, LON_COL)

    log.info("read %d grid cells (%d valid)", df.height, df[VAL_COL].is_not_nan().sum())
    return df


def normalise_longitudes(df: pl.DataFrame | pl.LazyFrame, lon_col: str = LON_COL):
    """Map longitudes in 0..360 (or any range) to -180..180

    Args:
        df (pl.DataFrame|pl.LazyFrame): table containing lon_col
        lon_col (str): longitude column name

    Returns:
        pl.DataFrame|pl.LazyFrame: table with lon_col in [-180, 180)
    """
    return df.with_columns((((pl.col(lon_col) + 180.0) % 360.0) - 180.0).alias(lon_col))


def clip_to_area(
    df: pl.DataFrame | pl.LazyFrame,
    area: Area,
    lat_col: str = LAT_COL,
    lon_col: str = LON_COL,
) -> pl.DataFrame:
    """Keep only table rows inside an area's lat/lon bounding box

    NaN values are kept (they are plotted as missing data).

    Args:
        df (pl.DataFrame|pl.LazyFrame): gridded table
        area (Area): area to clip to
        lat_col (str): latitude column name
        lon_col (str): longitude column name

    Returns:
        pl.DataFrame: rows inside the area
    """
    clipped = area.inside_latlon_bounds_polars(df, lat_col, lon_col, return_pl_dataframe=True)
    log.info("clipped to area %s : %d grid cells", area.name, clipped.height)
    return clipped


def table_to_grid(
    df: pl.DataFrame,
    lat_col: str = LAT_COL,
    lon_col: str = LON_COL,
    val_col: str = VAL_COL,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Convert a long (lat, lon, value) table to a regular 2-D grid

    Args:
        df (pl.DataFrame): gridded table
        lat_col (str): latitude column name
        lon_col (str): longitude column name
        val_col (str): value column name

    Returns:
        (lons, lats, vals): sorted unique longitudes, sorted unique latitudes and
        vals with shape (len(lats), len(lons)). Cells missing from the table are NaN.

    Raises:
        ValueError: if the table is empty, or its points are not on a regular lat/lon
                    grid (the grid would be mostly empty)
    """
    if df.height == 0:
        raise ValueError("no grid cells to plot (empty table)")

    lats = np.unique(df[lat_col].to_numpy())
    lons = np.unique(df[lon_col].to_numpy())

    n_cells = lats.size * lons.size
    if n_cells > MAX_GRID_CELLS_PER_ROW * df.height:
        log.error("%d table rows would need a %d x %d grid", df.height, lats.size, lons.size)
        raise ValueError(
            f"table of {df.height} rows is not on a regular lat/lon grid "
            f"({lats.size} unique latitudes x {lons.size} unique longitudes)"
        )

    lat_index = np.searchsorted(lats, df[lat_col].to_numpy())
    lon_index = np.searchsorted(lons, df[lon_col].to_numpy())

    vals = np.full((lats.size, lons.size), np.nan)
    vals[lat_index, lon_index] = df[val_col].to_numpy()

    return lons, lats, vals
