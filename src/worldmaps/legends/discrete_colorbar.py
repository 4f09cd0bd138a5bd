"""worldmaps.legends.discrete_colorbar.py

Build the geometry of a discrete color-bar legend.

`build_discrete_colorbar()` takes an ordered set of bin boundaries (breaks) and one
color per bin and returns a `LegendScene`: a small description of the legend made of
colored rectangles, up to two triangles (for unbounded end bins), tick marks, tick
labels and a title. The scene holds no matplotlib objects, it is drawn by
`worldmaps.legends.legend_render.draw_legend_scene()`.

Legend space is normalized: the long axis of the bar runs from 0 to 1 and the short
axis from 0 to `LegendConfig.bar_width`.

Example:

```
import numpy as np
from worldmaps.legends.discrete_colorbar import LegendConfig, build_discrete_colorbar

scene = build_discrete_colorbar(
    [0, 20, 40, 60, 80, 100, np.inf],
    ["#2c7bb6", "#abd9e9", "#ffffbf", "#fdae61", "#d7191c"],
    LegendConfig(title="SST anomaly (K)", direction="horizontal"),
)
```
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import matplotlib.colors as mcolors

# pylint: disable=too-many-instance-attributes
# pylint: disable=too-many-locals

log = logging.getLogger(__name__)

VALID_DIRECTIONS = ("vertical", "horizontal")
VALID_SPACINGS = ("constant", "natural")

TICK_LABEL_PAD = 0.01  # gap between tick mark end and label (bar-length units)
TITLE_PAD = 0.03  # gap between end of bar and title (bar-length units)


class ConfigurationError(ValueError):
    """Raised when breaks, colors or legend settings are malformed or inconsistent.

    Attributes:
        field (str): name of the offending input ("breaks", "colors", "spacing", ...)
    """

    def __init__(self, field_name: str, message: str):
        self.field = field_name
        super().__init__(f"{field_name}: {message}")


@dataclass(frozen=True)
class LegendConfig:
    """
    Settings for a discrete color-bar legend.

    Attributes:
        title (str): legend title text. Empty string for no title.
        direction (str): 'vertical' or 'horizontal'.
        spacing (str): 'constant' (all bins the same size) or 'natural' (bins sized in
                       proportion to their numeric width).
        expand_size (float): blank margin added on each side of the bar across its
                             thickness, in bar-length units.
        bar_width (float): bar thickness in bar-length units.
        font_size (float): font size of tick labels and title.
        border_color (str | None): edge color of each bin, or None for no edge.
        background (str | None): face color of the legend panel, or None (transparent).
        label_precision (int): number of decimal places in tick labels.
        reverse (bool): reverse the color order before assigning colors to bins.
        tick_length (float): tick mark length as a fraction of bar_width.
    """

    title: str = ""
    direction: str = "vertical"
    spacing: str = "constant"
    expand_size: float = 0.1
    bar_width: float = 0.05
    font_size: float = 10
    border_color: str | None = None
    background: str | None = None
    label_precision: int = 2
    reverse: bool = False
    tick_length: float = 0.25

    def __post_init__(self):
        if self.direction not in VALID_DIRECTIONS:
            raise ConfigurationError(
                "direction", f"must be one of {VALID_DIRECTIONS}, not {self.direction!r}"
            )
        if self.spacing not in VALID_SPACINGS:
            raise ConfigurationError(
                "spacing", f"must be one of {VALID_SPACINGS}, not {self.spacing!r}"
            )
        if not _is_finite_number(self.bar_width) or self.bar_width <= 0:
            raise ConfigurationError("bar_width", f"must be > 0, not {self.bar_width!r}")
        if not _is_finite_number(self.expand_size) or self.expand_size < 0:
            raise ConfigurationError("expand_size", f"must be >= 0, not {self.expand_size!r}")
        if not _is_finite_number(self.font_size) or self.font_size <= 0:
            raise ConfigurationError("font_size", f"must be > 0, not {self.font_size!r}")
        if not _is_finite_number(self.tick_length) or self.tick_length < 0:
            raise ConfigurationError("tick_length", f"must be >= 0, not {self.tick_length!r}")
        if (
            isinstance(self.label_precision, bool)
            or not isinstance(self.label_precision, int)
            or self.label_precision < 0
        ):
            raise ConfigurationError(
                "label_precision", f"must be an int >= 0, not {self.label_precision!r}"
            )
        for name in ("border_color", "background"):
            value = getattr(self, name)
            if value is not None and not mcolors.is_color_like(value):
                raise ConfigurationError(name, f"{value!r} is not a valid color")


@dataclass(frozen=True)
class Rectangle:
    """A finite bin drawn as a rectangle. (x, y) is the lower left corner."""

    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class Triangle:
    """An unbounded end bin drawn as a triangle pointing away from the bar.

    Attributes:
        vertices (tuple): three (x, y) vertices, the last one is the apex
        color (str): fill color
        position (str): 'bottom' (below the lowest break) or 'top' (above the highest)
    """

    vertices: tuple[tuple[float, float], ...]
    color: str
    position: str


@dataclass(frozen=True)
class TickMark:
    """Line segment marking a labelled break"""

    start: tuple[float, float]
    end: tuple[float, float]


@dataclass(frozen=True)
class TickLabel:
    """Text label for a break value"""

    text: str
    x: float
    y: float
    value: float
    rotation: float = 0.0
    ha: str = "left"
    va: str = "center"


@dataclass(frozen=True)
class TitleText:
    """Legend title placed at the far end of the bar"""

    text: str
    x: float
    y: float
    rotation: float = 0.0
    ha: str = "center"
    va: str = "bottom"


@dataclass(frozen=True)
class LegendScene:
    """Drawable description of a discrete color-bar legend"""

    rectangles: tuple[Rectangle, ...]
    triangles: tuple[Triangle, ...]
    tick_marks: tuple[TickMark, ...]
    tick_labels: tuple[TickLabel, ...]
    title: TitleText | None
    xlim: tuple[float, float]
    ylim: tuple[float, float]
    direction: str
    font_size: float
    border_color: str | None = None
    background: str | None = None

    @property
    def bottom_triangle(self) -> Triangle | None:
        """the triangle for the bin below the lowest finite break, or None"""
        for triangle in self.triangles:
            if triangle.position == "bottom":
                return triangle
        return None

    @property
    def top_triangle(self) -> Triangle | None:
        """the triangle for the bin above the highest finite break, or None"""
        for triangle in self.triangles:
            if triangle.position == "top":
                return triangle
        return None


@dataclass(frozen=True)
class ResolvedBins:
    """Breaks and colors after infinite end breaks have been stripped.

    Attributes:
        finite_breaks (tuple[float]): breaks with any -inf/+inf ends removed
        rect_colors (tuple[str]): one color per finite bin, in order
        lower_color (str|None): color of the bin below finite_breaks[0], or None if
                                the lowest break is finite
        upper_color (str|None): color of the bin above finite_breaks[-1], or None if
                                the highest break is finite
    """

    finite_breaks: tuple[float, ...]
    rect_colors: tuple[str, ...]
    lower_color: str | None = None
    upper_color: str | None = None

    @property
    def n_bins(self) -> int:
        """number of finite (rectangle) bins"""
        return len(self.finite_breaks) - 1

    @property
    def has_lower_triangle(self) -> bool:
        """True if the lowest bin is unbounded"""
        return self.lower_color is not None

    @property
    def has_upper_triangle(self) -> bool:
        """True if the highest bin is unbounded"""
        return self.upper_color is not None


def _is_finite_number(value) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def _validate_breaks(breaks: Sequence[float]) -> list[float]:
    """Check a break sequence and return it as a list of floats.

    Raises:
        ConfigurationError: if breaks are too few, not numeric, NaN, not strictly
                            increasing, or infinite anywhere except the ends
    """
    try:
        values = [float(b) for b in breaks]
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("breaks", f"must be numeric: {exc}") from exc

    if len(values) < 2:
        raise ConfigurationError("breaks", f"need at least 2 breaks, got {len(values)}")

    for i, value in enumerate(values):
        if math.isnan(value):
            raise ConfigurationError("breaks", f"break {i} is NaN")
        if value == -math.inf and i != 0:
            raise ConfigurationError("breaks", f"-inf only allowed as first break (index {i})")
        if value == math.inf and i != len(values) - 1:
            raise ConfigurationError("breaks", f"+inf only allowed as last break (index {i})")

    for i in range(len(values) - 1):
        if not values[i] < values[i + 1]:
            raise ConfigurationError(
                "breaks",
                f"must be strictly increasing: break {i} ({values[i]}) >= "
                f"break {i + 1} ({values[i + 1]})",
            )

    return values


def resolve_bins(
    breaks: Sequence[float], colors: Sequence, reverse: bool = False
) -> ResolvedBins:
    """Strip infinite end breaks and assign colors to rectangles and triangles.

    Two color counts are accepted:

    - one color per finite bin: an unbounded end bin reuses the adjacent extreme
      color (colors[0] below, colors[-1] above)
    - one color per finite bin plus one per unbounded end bin: colors[0] fills the
      lower triangle, colors[-1] the upper triangle, the rest fill the rectangles

    Both counts are deliberate. The second is the layout where each open end bin has
    its own color, eg breaks [-inf, 0, 50, 100] with 3 colors: colors[0] below 0,
    then one color for each of the 2 rectangles. Any other count raises.

    Args:
        breaks (Sequence[float]): strictly increasing bin boundaries, first may be
                                  -inf and last may be +inf
        colors (Sequence): matplotlib color specs
        reverse (bool): reverse the color order before assignment

    Returns:
        ResolvedBins: finite breaks plus per-bin colors

    Raises:
        ConfigurationError: on any invalid break or color input
    """
    values = _validate_breaks(breaks)

    lower_open = values[0] == -math.inf
    upper_open = values[-1] == math.inf
    finite_breaks = values[int(lower_open) : len(values) - int(upper_open)]

    if len(finite_breaks) < 2:
        raise ConfigurationError(
            "breaks", f"need at least 2 finite breaks, got {len(finite_breaks)}"
        )

    if colors is None or isinstance(colors, str):
        raise ConfigurationError("colors", "must be a sequence of colors")
    color_list = list(colors)
    for i, color in enumerate(color_list):
        if not mcolors.is_color_like(color):
            raise ConfigurationError("colors", f"color {i} ({color!r}) is not a valid color")
    if reverse:
        color_list = color_list[::-1]

    n_bins = len(finite_breaks) - 1
    n_triangles = int(lower_open) + int(upper_open)

    if len(color_list) == n_bins:
        rect_colors = color_list
    elif n_triangles and len(color_list) == n_bins + n_triangles:
        rect_colors = color_list[int(lower_open) : len(color_list) - int(upper_open)]
    else:
        expected = f"{n_bins}" if not n_triangles else f"{n_bins} or {n_bins + n_triangles}"
        raise ConfigurationError(
            "colors",
            f"number of colors ({len(color_list)}) does not match number of bins "
            f"(expected {expected} for {len(values)} breaks)",
        )

    return ResolvedBins(
        finite_breaks=tuple(finite_breaks),
        rect_colors=tuple(rect_colors),
        lower_color=color_list[0] if lower_open else None,
        upper_color=color_list[-1] if upper_open else None,
    )


def _long_axis_shares(bins: ResolvedBins, spacing: str) -> list[float]:
    """Fraction of the bar length taken by each drawn bin, in drawing order
    (lower triangle, rectangles, upper triangle)."""
    n_triangles = int(bins.has_lower_triangle) + int(bins.has_upper_triangle)

    if spacing == "constant":
        share = 1.0 / (bins.n_bins + n_triangles)
        return [share] * (bins.n_bins + n_triangles)

    # natural spacing is only reached with no triangles
    widths = [
        bins.finite_breaks[i + 1] - bins.finite_breaks[i] for i in range(bins.n_bins)
    ]
    total = sum(widths)
    if not math.isfinite(total):
        raise ConfigurationError(
            "breaks",
            f"total width of finite breaks overflows ({total}), cannot use natural spacing",
        )
    return [w / total for w in widths]


def _swap_xy(point: tuple[float, float]) -> tuple[float, float]:
    return (point[1], point[0])


def _to_horizontal(scene: LegendScene) -> LegendScene:
    """Transpose a vertical scene so the bar's long axis runs along x."""
    rectangles = tuple(
        Rectangle(x=r.y, y=r.x, width=r.height, height=r.width, color=r.color)
        for r in scene.rectangles
    )
    triangles = tuple(
        Triangle(
            vertices=tuple(_swap_xy(v) for v in t.vertices), color=t.color, position=t.position
        )
        for t in scene.triangles
    )
    tick_marks = tuple(
        TickMark(start=_swap_xy(t.start), end=_swap_xy(t.end)) for t in scene.tick_marks
    )
    tick_labels = tuple(
        TickLabel(
            text=t.text, x=t.y, y=t.x, value=t.value, rotation=0.0, ha="center", va="bottom"
        )
        for t in scene.tick_labels
    )
    title = None
    if scene.title is not None:
        title = TitleText(
            text=scene.title.text, x=scene.title.y, y=scene.title.x, ha="left", va="center"
        )

    return LegendScene(
        rectangles=rectangles,
        triangles=triangles,
        tick_marks=tick_marks,
        tick_labels=tick_labels,
        title=title,
        xlim=scene.ylim,
        ylim=scene.xlim,
        direction="horizontal",
        font_size=scene.font_size,
        border_color=scene.border_color,
        background=scene.background,
    )


def build_discrete_colorbar(
    breaks: Sequence[float],
    colors: Sequence,
    config: LegendConfig | None = None,
) -> LegendScene:
    """Build a discrete color-bar legend scene.

    Steps:
    1. validate breaks and colors, strip -inf/+inf ends (see `resolve_bins`)
    2. size each bin along the bar (constant or natural spacing)
    3. lay out triangle / rectangles / triangle from 0 to 1 along the bar
    4. label the upper edge of every rectangle, plus the lower edge of the first
       rectangle when a lower triangle is attached to it
    5. transpose for horizontal legends and add the title at the far end

    Args:
        breaks (Sequence[float]): N+1 strictly increasing breaks. breaks[0] may be -inf
                                  and breaks[-1] may be +inf (drawn as triangles).
        colors (Sequence): colors for the bins (see `resolve_bins` for counts)
        config (LegendConfig|None): legend settings. Defaults to LegendConfig().

    Returns:
        LegendScene: the legend primitives

    Raises:
        ConfigurationError: on invalid breaks, colors or config, including natural
                            spacing combined with an infinite break
    """
    if config is None:
        config = LegendConfig()

    bins = resolve_bins(breaks, colors, reverse=config.reverse)

    if config.spacing == "natural" and (bins.has_lower_triangle or bins.has_upper_triangle):
        raise ConfigurationError(
            "spacing", "natural spacing cannot be used with an infinite break"
        )

    shares = _long_axis_shares(bins, config.spacing)
    width = config.bar_width
    centre = width / 2.0

    rectangles = []
    triangles = []
    edges = []  # long-axis position of each finite break
    pos = 0.0
    i_share = 0

    if bins.has_lower_triangle:
        share = shares[i_share]
        i_share += 1
        triangles.append(
            Triangle(
                vertices=((0.0, share), (width, share), (centre, 0.0)),
                color=bins.lower_color,
                position="bottom",
            )
        )
        pos = share

    edges.append(pos)
    for color in bins.rect_colors:
        share = shares[i_share]
        i_share += 1
        rectangles.append(Rectangle(x=0.0, y=pos, width=width, height=share, color=color))
        pos += share
        edges.append(pos)

    if bins.has_upper_triangle:
        share = shares[i_share]
        triangles.append(
            Triangle(
                vertices=((0.0, pos), (width, pos), (centre, pos + share)),
                color=bins.upper_color,
                position="top",
            )
        )

    first_labelled = 0 if bins.has_lower_triangle else 1
    tick_end = width + config.tick_length * width
    tick_marks = []
    tick_labels = []
    for i in range(first_labelled, len(bins.finite_breaks)):
        value = bins.finite_breaks[i]
        tick_marks.append(TickMark(start=(width, edges[i]), end=(tick_end, edges[i])))
        tick_labels.append(
            TickLabel(
                text=f"{value:.{config.label_precision}f}",
                x=tick_end + TICK_LABEL_PAD,
                y=edges[i],
                value=value,
            )
        )

    title = None
    if config.title:
        title = TitleText(text=config.title, x=centre, y=1.0 + TITLE_PAD)

    scene = LegendScene(
        rectangles=tuple(rectangles),
        triangles=tuple(triangles),
        tick_marks=tuple(tick_marks),
        tick_labels=tuple(tick_labels),
        title=title,
        xlim=(-config.expand_size, width + config.expand_size),
        ylim=(0.0, 1.0),
        direction="vertical",
        font_size=config.font_size,
        border_color=config.border_color,
        background=config.background,
    )

    if config.direction == "horizontal":
        scene = _to_horizontal(scene)

    log.debug(
        "built %s legend: %d rectangles, %d triangles, %d labels",
        scene.direction,
        len(scene.rectangles),
        len(scene.triangles),
        len(scene.tick_labels),
    )
    return scene
