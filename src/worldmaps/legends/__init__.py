"""worldmaps.legends

# Discrete color-bar legends

## discrete_colorbar.py

Builds the geometry of a discrete color-bar legend from a set of breaks and one color
per bin: `worldmaps.legends.discrete_colorbar.build_discrete_colorbar`.

- finite bins are drawn as rectangles
- a first break of -inf or a last break of +inf adds a triangle at that end, showing
  that the end bin is open ("less than" / "greater than")
- bins can be drawn all the same size (`spacing="constant"`) or in proportion to
  their numeric width (`spacing="natural"`, only with finite breaks)
- vertical or horizontal bars

Invalid breaks, colors or settings raise
`worldmaps.legends.discrete_colorbar.ConfigurationError`.

## legend_render.py

Draws a legend scene on a matplotlib Axes: `worldmaps.legends.legend_render.draw_legend_scene`,
or build and draw in one call with `worldmaps.legends.legend_render.plot_discrete_cbar`.

## Example

```
import numpy as np
from worldmaps.legends.discrete_colorbar import LegendConfig
from worldmaps.legends.legend_render import plot_discrete_cbar

ax = plot_discrete_cbar(
    [-np.inf, 0, 50, 100],
    ["#3E4371", "#abd9e9", "#fdae61"],
    LegendConfig(title="precipitation (mm)", direction="horizontal"),
)
ax.figure.savefig("legend.png")
```
"""
