"""Area definition"""

# pylint: disable=R0801 # warning for similar lines

area_definition = {
    "long_name": "Global",
    "area_summary": "whole globe, Robinson projection",
    # --------------------------------------------
    # Area definition
    # --------------------------------------------
    "global_extent": True,  # plot the whole globe, ignore the bounding box for the extent
    "minlon": -180.0,  # minimum longitude of bounding box (-180..180 E)
    "maxlon": 180.0,  # maximum longitude of bounding box (-180..180 E)
    "minlat": -90.0,  # minimum latitude of bounding box
    "maxlat": 90.0,  # maximum latitude of bounding box
    #   --------
    "projection": "Robinson",  # cartopy projection class name
    "central_longitude": 0.0,  # degrees E
    # --------------------------------------------
    # Map features
    # --------------------------------------------
    "draw_coastlines": True,  # Draw coastlines
    "coastline_color": "dimgrey",  # Colour to draw coastlines
    "coastline_resolution": "low",  # 'low' (110m), 'medium' (50m), 'high' (10m)
    "draw_borders": True,  # Draw country borders
    "border_color": "grey",  # Colour to draw country borders
    "draw_ocean": True,  # fill oceans
    "ocean_color": "#dfeefa",  # ocean fill colour
    "land_color": None,  # None or land fill colour (under the data)
    "show_gridlines": True,  # True|False, display lat/lon grid lines
    "gridline_color": "lightgrey",  # color to use for lat/lon grid lines
    "draw_gridlabels": False,  # whether to draw the grid labels
    # --------------------------------------------
    # Figure
    # --------------------------------------------
    "figsize": (12, 6),  # width, height (inches)
    "dpi": 100,
    # ------------------------------------------------------
    # Discrete legend
    # ------------------------------------------------------
    "legend_direction": "vertical",  # vertical, horizontal
    "map_width_ratio": 7,  # map panel : legend panel width (or height) ratio
    "legend_width_ratio": 1,
    "legend_bar_width": 0.05,  # bar thickness (fraction of bar length)
    "legend_expand_size": 0.1,  # margin either side of the bar (fraction of bar length)
    "legend_font_size": 9,
    "legend_spacing": "constant",  # constant, natural
    "legend_border_color": None,  # None or edge color of legend bins
    # ------------------------------------------------------
    # Default colormap for data (can be overridden in dataset dicts)
    # ------------------------------------------------------
    "cmap_name": "RdYlBu_r",
}
