"""Area definition"""

area_definition = {
    "use_definitions_from": "africa",
    "long_name": "South America",
    "minlon": -85.0,
    "maxlon": -30.0,
    "minlat": -57.0,
    "maxlat": 14.0,
    "figsize": (7, 9),
}
