"""Area definition"""

area_definition = {
    "use_definitions_from": "europe",
    "long_name": "Mediterranean Sea",
    "minlon": -6.0,
    "maxlon": 37.0,
    "minlat": 30.0,
    "maxlat": 46.0,
    "projection": "PlateCarree",
    "central_longitude": 0.0,
    "coastline_resolution": "high",
    "draw_gridlabels": True,
    "figsize": (12, 5.5),
    "legend_direction": "horizontal",
    "map_width_ratio": 7,
    "legend_expand_size": 0.25,
    "cmap_name": "viridis",
}
