"""worldmaps.gridded

# Gridded data tables

`worldmaps.gridded.gridded` reads a 2-D (lat, lon) field from a NetCDF file into a polars
DataFrame with columns `latitude`, `longitude`, `value`, clips it to an area's bounding
box and converts it back to a regular grid for plotting.

Data must already be on the grid to be plotted. Regridding is not done here.
"""
