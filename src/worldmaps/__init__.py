"""
Documentation for the worldmaps package: plot gridded geophysical fields on
global and regional maps, binned into discrete colors with a discrete color legend.

# Installation

Install into a python (>= 3.10) virtual environment from the repository directory:

```
pip install -e .
```

and to run the tests:

```
pip install -e ".[test]"
pytest
```

Map coastlines, borders and oceans are drawn with cartopy's Natural Earth features,
which are downloaded into cartopy's data directory the first time each is used.

# Package Layout

- `worldmaps.legends` : discrete color legend. `build_discrete_colorbar()` turns
  bin breaks and colors into a scene of rectangles, triangles (open ended bins),
  tick marks and labels, which `draw_legend_scene()` draws on a matplotlib axis.
- `worldmaps.binning` : bin colors from matplotlib colormaps, regular breaks,
  classification of values into bins and a matching colormap/norm for map layers.
- `worldmaps.gridded` : read gridded NetCDF fields into polars tables, clip them to
  an area and convert back to a grid.
- `worldmaps.areas` : area definitions and the `Worldplot` map plotting class.
- `worldmaps.tools` : command line tools, including `plot_world_map`.
- `worldmaps.logging_funcs` : logging setup for the tools.

# Quick Start

Draw a legend on its own:

```
import numpy as np
from worldmaps.legends.discrete_colorbar import LegendConfig
from worldmaps.legends.legend_render import plot_discrete_cbar

ax = plot_discrete_cbar(
    [-np.inf, 0, 50, 100],
    ["navy", "skyblue", "orange"],
    LegendConfig(title="Elevation change (cm)", direction="horizontal"),
)
ax.figure.savefig("/tmp/legend.png")
```

Plot a NetCDF parameter on a map from the command line:

`plot_world_map --file sst.nc --param analysed_sst --area europe --breaks=-inf,5,10,15,20,inf`

# Test Development

Each module has an associated pytest test in a **tests/** directory inside the
module directory. ie:

```
mymodule.py
tests/test_mymodule.py
```

If your test needs data from outside the repository (including Natural Earth
downloads) include the following at the top of your test code, or mark the test:

`pytestmark = pytest.mark.requires_external_data`

and exclude those tests when offline with `pytest -m "not requires_external_data"`.
"""
