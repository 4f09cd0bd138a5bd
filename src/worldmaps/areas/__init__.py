"""worldmaps.areas

# Area Definitions and Worldplot class

## definitions

contain standard global and regional area definition files used by the Worldplot class
and the plot_world_map tool. Each area definition is stored in a separate
<area_name>.py file. A definition can inherit from another with
`"use_definitions_from": "<other_area_name>"` and then change only what differs.

## areas.py

contains the Area class to load and check area definitions, and to select
lat/lon points (numpy arrays or polars tables) inside an area's bounding box.

## map_plot.py

contains the Worldplot class. The main external function of the Worldplot class
is **plot_grid()**:

`worldmaps.areas.map_plot.Worldplot.plot_grid`

Worldplot('some_area_name').plot_grid() plots a gridded field on the area's map,
binned into discrete colors, with a discrete color legend (see `worldmaps.legends`)
beside or below the map.

## Example : plot a field on a map of the Mediterranean

```
import numpy as np
from worldmaps.areas.map_plot import Worldplot

lats = np.arange(30.5, 46.0, 1.0)
lons = np.arange(-5.5, 37.0, 1.0)
dataset = {
    "lats": lats,
    "lons": lons,
    "vals": np.add.outer(lats, lons / 10.0),
    "name": "sst",
    "units": "degC",
}

Worldplot("mediterranean").plot_grid(
    dataset,
    breaks=[-np.inf, 32, 36, 40, 44, np.inf],
    colors=["navy", "blue", "yellow", "orange", "red", "darkred"],
    output_dir="/tmp",
)
```

## List all area names

```
from worldmaps.areas.areas import list_all_area_definition_names
for area in list_all_area_definition_names():
    print(area)
```
"""
