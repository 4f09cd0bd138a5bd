"""Area definition"""

area_definition = {
    "use_definitions_from": "global",
    "long_name": "Global (Plate Carree)",
    "area_summary": "whole globe, equirectangular with a horizontal legend",
    "projection": "PlateCarree",
    "draw_gridlabels": True,
    "figsize": (12, 7.5),
    "legend_direction": "horizontal",
    "map_width_ratio": 8,
    "legend_width_ratio": 1,
    "legend_expand_size": 0.2,
}
