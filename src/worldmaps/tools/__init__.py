"""worldmaps.tools

Command line tools

- plot_world_map.py : plot a gridded NetCDF parameter on a global or regional map
  with a discrete color legend
"""
