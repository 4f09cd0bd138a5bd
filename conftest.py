"""Pytest fixtures shared by the worldmaps tests."""

import numpy as np
import pytest
from netCDF4 import Dataset  # pylint: disable=E0611

FILL_VALUE = -999.0


def write_sample_netcdf(path, with_time: bool = True) -> str:
    """Write a small global 10 degree field to a NetCDF file.

    The field is 'sst' on lat (-85..85) x lon (0..350, so longitudes need wrapping),
    value = latitude + longitude / 100, with the cell nearest (5N, 10E) masked.

    Args:
        path (Path|str): file to write
        with_time (bool): add a leading time dimension of length 1

    Returns:
        str: path written
    """
    lats = np.arange(-85.0, 90.0, 10.0)
    lons = np.arange(0.0, 360.0, 10.0)
    lon_grid, lat_grid = np.meshgrid(lons, lats)
    vals = lat_grid + lon_grid / 100.0
    vals[np.argmin(np.abs(lats - 5.0)), np.argmin(np.abs(lons - 10.0))] = FILL_VALUE

    with Dataset(str(path), "w") as nc:
        nc.createDimension("lat", lats.size)
        nc.createDimension("lon", lons.size)
        nc.createVariable("lat", "f8", ("lat",))[:] = lats
        nc.createVariable("lon", "f8", ("lon",))[:] = lons
        if with_time:
            nc.createDimension("time", 1)
            nc.createVariable("time", "f8", ("time",))[:] = [0.0]
            sst = nc.createVariable("sst", "f4", ("time", "lat", "lon"), fill_value=FILL_VALUE)
            sst.units = "degC"
            sst[:] = vals[np.newaxis, :, :]
        else:
            sst = nc.createVariable("sst", "f4", ("lat", "lon"), fill_value=FILL_VALUE)
            sst.units = "degC"
            sst[:] = vals

    return str(path)


@pytest.fixture(name="sample_netcdf")
def fixture_sample_netcdf(tmp_path) -> str:
    """Path to a small global gridded NetCDF file"""
    return write_sample_netcdf(tmp_path / "sample_sst.nc")


@pytest.fixture(name="sample_netcdf_no_time")
def fixture_sample_netcdf_no_time(tmp_path) -> str:
    """Path to a small global gridded NetCDF file without a time dimension"""
    return write_sample_netcdf(tmp_path / "sample_sst_2d.nc", with_time=False)
