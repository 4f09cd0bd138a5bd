"""Area definition"""

# pylint: disable=R0801 # warning for similar lines

area_definition = {
    "long_name": "Europe",
    # --------------------------------------------
    # Area definition
    # --------------------------------------------
    "global_extent": False,
    "minlon": -25.0,  # minimum longitude of bounding box (-180..180 E)
    "maxlon": 45.0,  # maximum longitude of bounding box (-180..180 E)
    "minlat": 34.0,  # minimum latitude of bounding box
    "maxlat": 72.0,  # maximum latitude of bounding box
    #   --------
    "projection": "LambertConformal",  # cartopy projection class name
    "central_longitude": 10.0,  # degrees E
    "standard_parallels": (35.0, 65.0),  # for LambertConformal
    # --------------------------------------------
    # Map features
    # --------------------------------------------
    "draw_coastlines": True,
    "coastline_color": "dimgrey",
    "coastline_resolution": "medium",  # 'low' (110m), 'medium' (50m), 'high' (10m)
    "draw_borders": True,
    "border_color": "grey",
    "draw_ocean": True,
    "ocean_color": "#dfeefa",
    "land_color": None,
    "show_gridlines": True,
    "gridline_color": "lightgrey",
    "draw_gridlabels": False,
    # --------------------------------------------
    # Figure
    # --------------------------------------------
    "figsize": (9, 8),
    "dpi": 100,
    # ------------------------------------------------------
    # Discrete legend
    # ------------------------------------------------------
    "legend_direction": "vertical",
    "map_width_ratio": 6,
    "legend_width_ratio": 1,
    "legend_bar_width": 0.05,
    "legend_expand_size": 0.1,
    "legend_font_size": 9,
    "cmap_name": "RdYlBu_r",
}
