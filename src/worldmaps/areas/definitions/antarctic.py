"""Area definition"""

area_definition = {
    "use_definitions_from": "global",
    "long_name": "Antarctic",
    "area_summary": "south of 60S, polar stereographic",
    "global_extent": False,
    "minlon": -180.0,
    "maxlon": 180.0,
    "minlat": -90.0,
    "maxlat": -60.0,
    "projection": "SouthPolarStereo",
    "central_longitude": 0.0,
    "coastline_resolution": "medium",
    "figsize": (8, 7),
    "map_width_ratio": 5,
}
