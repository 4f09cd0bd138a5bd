"""Area definition"""

area_definition = {
    "use_definitions_from": "europe",
    "long_name": "North Atlantic",
    "minlon": -80.0,
    "maxlon": 10.0,
    "minlat": 0.0,
    "maxlat": 70.0,
    "projection": "Mercator",
    "central_longitude": -35.0,
    "coastline_resolution": "low",
    "figsize": (9, 9),
}
