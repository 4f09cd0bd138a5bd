"""worldmaps.binning

# Binning values into discrete color classes

`worldmaps.binning.binning` holds the helpers that turn continuous gridded values into
discrete classes for plotting:

- pick colors for each bin from a matplotlib colormap (get_discrete_colors)
- build evenly spaced breaks, optionally with open ends (regular_breaks)
- classify values into bins (classify_values)
- make a ListedColormap and BoundaryNorm that color the map layer with exactly the
  colors shown in the discrete legend (discrete_cmap_and_norm)
"""
