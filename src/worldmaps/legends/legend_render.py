"""worldmaps.legends.legend_render.py

Draw a `LegendScene` (from `worldmaps.legends.discrete_colorbar`) on a matplotlib Axes.

Each scene primitive maps to one matplotlib artist:

| primitive | artist |
|---|---|
| Rectangle | matplotlib.patches.Rectangle |
| Triangle | matplotlib.patches.Polygon |
| TickMark | Line2D (ax.plot) |
| TickLabel, TitleText | Text (ax.text) |

Example:

```
import numpy as np
from worldmaps.legends.legend_render import plot_discrete_cbar

ax = plot_discrete_cbar([-np.inf, 0, 50, 100], ["blue", "white", "red"])
ax.figure.savefig("legend.png")
```
"""

import logging
from typing import Sequence

import matplotlib.patches as mpatches
from matplotlib import pyplot as plt
from matplotlib.axes import Axes

from worldmaps.legends.discrete_colorbar import (
    LegendConfig,
    LegendScene,
    build_discrete_colorbar,
)

log = logging.getLogger(__name__)

# zorder of legend layers
BIN_ZORDER = 2
TICK_ZORDER = 3
TEXT_ZORDER = 4


def draw_legend_scene(ax: Axes, scene: LegendScene) -> Axes:
    """Draw all primitives of a legend scene on an axis

    Args:
        ax (Axes): axis to draw on. Its frame and ticks are turned off.
        scene (LegendScene): scene from build_discrete_colorbar()

    Returns:
        Axes: the axis drawn on
    """
    edgecolor = scene.border_color if scene.border_color is not None else "none"
    linewidth = 0.8 if scene.border_color is not None else 0.0

    for rect in scene.rectangles:
        ax.add_patch(
            mpatches.Rectangle(
                (rect.x, rect.y),
                rect.width,
                rect.height,
                facecolor=rect.color,
                edgecolor=edgecolor,
                linewidth=linewidth,
                zorder=BIN_ZORDER,
            )
        )

    for triangle in scene.triangles:
        ax.add_patch(
            mpatches.Polygon(
                list(triangle.vertices),
                closed=True,
                facecolor=triangle.color,
                edgecolor=edgecolor,
                linewidth=linewidth,
                zorder=BIN_ZORDER,
            )
        )

    tick_color = scene.border_color if scene.border_color is not None else "k"
    for tick in scene.tick_marks:
        ax.plot(
            [tick.start[0], tick.end[0]],
            [tick.start[1], tick.end[1]],
            color=tick_color,
            linewidth=0.8,
            solid_capstyle="butt",
            zorder=TICK_ZORDER,
        )

    for label in scene.tick_labels:
        ax.text(
            label.x,
            label.y,
            label.text,
            rotation=label.rotation,
            ha=label.ha,
            va=label.va,
            fontsize=scene.font_size,
            clip_on=False,
            zorder=TEXT_ZORDER,
        )

    if scene.title is not None:
        ax.text(
            scene.title.x,
            scene.title.y,
            scene.title.text,
            rotation=scene.title.rotation,
            ha=scene.title.ha,
            va=scene.title.va,
            fontsize=scene.font_size,
            fontweight="bold",
            clip_on=False,
            zorder=TEXT_ZORDER,
        )

    ax.set_xlim(*scene.xlim)
    ax.set_ylim(*scene.ylim)
    ax.set_axis_off()
    if scene.background is not None:
        # set_axis_off() hides the axes patch, so paint the axes region with a patch
        ax.add_patch(
            mpatches.Rectangle(
                (0, 0),
                1,
                1,
                transform=ax.transAxes,
                facecolor=scene.background,
                edgecolor="none",
                zorder=0,
            )
        )

    return ax


def plot_discrete_cbar(
    breaks: Sequence[float],
    colors: Sequence,
    config: LegendConfig | None = None,
    ax: Axes | None = None,
) -> Axes:
    """Build and draw a discrete color-bar legend

    Args:
        breaks (Sequence[float]): bin boundaries, first may be -inf and last +inf
        colors (Sequence): bin colors
        config (LegendConfig|None): legend settings. Defaults to LegendConfig().
        ax (Axes|None): axis to draw on. If None a new figure sized for the legend
                        direction is created.

    Returns:
        Axes: the legend axis

    Raises:
        ConfigurationError: on invalid breaks, colors or config (before any drawing)
    """
    if config is None:
        config = LegendConfig()

    scene = build_discrete_colorbar(breaks, colors, config)

    if ax is None:
        if scene.direction == "horizontal":
            fig = plt.figure(figsize=(6, 1.2))
            ax = fig.add_axes((0.05, 0.2, 0.8, 0.5))
        else:
            fig = plt.figure(figsize=(1.6, 5))
            ax = fig.add_axes((0.1, 0.05, 0.5, 0.85))

    return draw_legend_scene(ax, scene)
