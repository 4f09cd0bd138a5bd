"""Area definition"""

area_definition = {
    "use_definitions_from": "europe",
    "long_name": "Africa",
    "minlon": -20.0,
    "maxlon": 55.0,
    "minlat": -37.0,
    "maxlat": 38.0,
    "projection": "PlateCarree",
    "central_longitude": 0.0,
    "coastline_resolution": "low",
    "draw_gridlabels": True,
    "figsize": (9, 8),
}
