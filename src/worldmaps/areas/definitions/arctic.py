"""Area definition"""

area_definition = {
    "use_definitions_from": "global",
    "long_name": "Arctic",
    "area_summary": "north of 60N, polar stereographic",
    "global_extent": False,
    "minlon": -180.0,
    "maxlon": 180.0,
    "minlat": 60.0,
    "maxlat": 90.0,
    "projection": "NorthPolarStereo",
    "central_longitude": 0.0,
    "coastline_resolution": "medium",
    "figsize": (8, 7),
    "map_width_ratio": 5,
}
