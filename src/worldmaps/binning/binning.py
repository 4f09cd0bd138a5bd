"""worldmaps.binning.binning.py

Helpers to bin gridded values into discrete color classes, consistent with the
discrete legend built by `worldmaps.legends.discrete_colorbar`.

- `get_discrete_colors()` : sample n colors from a matplotlib colormap
- `regular_breaks()` : evenly spaced breaks, optionally open ended
- `classify_values()` : bin index of each value
- `discrete_cmap_and_norm()` : ListedColormap + BoundaryNorm for map layers
"""

import logging
import math
from typing import List, Sequence, Tuple, Union

import matplotlib.colors as mcolors
import numpy as np
from matplotlib import colormaps

from worldmaps.legends.discrete_colorbar import ConfigurationError, resolve_bins

log = logging.getLogger(__name__)

VALID_EXTENDS = ("neither", "min", "max", "both")

# color used for values outside a closed (finite) end break
TRANSPARENT = (0.0, 0.0, 0.0, 0.0)


def get_discrete_colors(
    n: int, cmap_name: str = "RdYlBu_r", as_hex: bool = True
) -> List[Union[str, Tuple[float, float, float, float]]]:
    """Get a list of n colors evenly sampled from a matplotlib colormap.

    Args:
        n (int): number of colors (one per bin)
        cmap_name (str): matplotlib colormap name. Default is RdYlBu_r.
        as_hex (bool): If True, returns colors as hex strings. If False, returns RGBA tuples.

    Returns:
        List[str | Tuple[float, float, float, float]]: List of colors

    Raises:
        ConfigurationError: if n < 1 or cmap_name is not a known colormap
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ConfigurationError("colors", f"number of colors must be an int >= 1, not {n!r}")
    if cmap_name not in colormaps:
        raise ConfigurationError("cmap_name", f"{cmap_name!r} is not a matplotlib colormap")

    cmap = colormaps[cmap_name].resampled(int(n))
    colors: List[Union[str, Tuple[float, float, float, float]]] = [
        tuple(float(c) for c in cmap(i)) for i in range(cmap.N)  # type: ignore[misc]
    ]

    if as_hex:
        colors = [mcolors.to_hex(color) for color in colors]

    return colors


def regular_breaks(
    vmin: float, vmax: float, n_bins: int, extend: str = "neither"
) -> List[float]:
    """Evenly spaced breaks between vmin and vmax.

    Args:
        vmin (float): lowest finite break
        vmax (float): highest finite break
        n_bins (int): number of finite bins
        extend (str): 'neither', 'min' (prepend -inf), 'max' (append +inf) or 'both'

    Returns:
        List[float]: n_bins + 1 finite breaks, plus -inf/+inf depending on extend

    Raises:
        ConfigurationError: if the range or bin count is invalid
    """
    if extend not in VALID_EXTENDS:
        raise ConfigurationError("extend", f"must be one of {VALID_EXTENDS}, not {extend!r}")
    if isinstance(n_bins, bool) or not isinstance(n_bins, (int, np.integer)) or n_bins < 1:
        raise ConfigurationError("n_bins", f"must be an int >= 1, not {n_bins!r}")
    if not (math.isfinite(vmin) and math.isfinite(vmax)) or vmin >= vmax:
        raise ConfigurationError("breaks", f"need finite vmin < vmax, got {vmin}, {vmax}")

    breaks = [float(b) for b in np.linspace(vmin, vmax, int(n_bins) + 1)]
    if extend in ("min", "both"):
        breaks.insert(0, -math.inf)
    if extend in ("max", "both"):
        breaks.append(math.inf)
    return breaks


def classify_values(vals: np.ndarray, breaks: Sequence[float]) -> np.ndarray:
    """Find the bin index of each value.

    Bins are numbered from 0 in legend order, including any open end bins: with
    breaks [-inf, 0, 10, 20] values < 0 are bin 0 and values in [0, 10) are bin 1.
    Bins are half open [b_i, b_i+1), except that the highest finite bin includes its
    upper break when there is no open top bin.

    Args:
        vals (np.ndarray): values to classify (any shape)
        breaks (Sequence[float]): bin boundaries (validated as for the legend)

    Returns:
        np.ndarray: int array, same shape as vals. -1 where vals are NaN or outside
                    the finite end breaks.

    Raises:
        ConfigurationError: on invalid breaks
    """
    # validate with a dummy color per bin, colors are not used here
    n_all_bins = len(breaks) - 1
    resolve_bins(breaks, ["k"] * max(n_all_bins, 0))

    edges = np.asarray(breaks, dtype=float)
    values = np.asarray(vals, dtype=float)
    shape = values.shape
    values = np.atleast_1d(values)

    indices = np.searchsorted(edges, values, side="right") - 1

    # closed top: value equal to the last break belongs to the last bin
    if math.isfinite(edges[-1]):
        indices[values == edges[-1]] = n_all_bins - 1

    indices[(indices < 0) | (indices >= n_all_bins)] = -1
    indices[np.isnan(values)] = -1

    return indices.astype(int).reshape(shape)


def discrete_cmap_and_norm(
    breaks: Sequence[float], colors: Sequence, reverse: bool = False
) -> Tuple[mcolors.ListedColormap, mcolors.BoundaryNorm]:
    """Colormap and norm that color a map layer exactly like the discrete legend.

    The norm boundaries are the finite breaks. Values below the lowest or above the
    highest finite break take the open end (triangle) color if that end is open,
    otherwise they are transparent.

    Args:
        breaks (Sequence[float]): bin boundaries, first may be -inf and last +inf
        colors (Sequence): bin colors (see worldmaps.legends.discrete_colorbar.resolve_bins)
        reverse (bool): reverse the color order

    Returns:
        (ListedColormap, BoundaryNorm)

    Raises:
        ConfigurationError: on invalid breaks or colors
    """
    bins = resolve_bins(breaks, colors, reverse=reverse)

    cmap = mcolors.ListedColormap(list(bins.rect_colors), name="worldmaps_discrete")
    cmap.set_under(bins.lower_color if bins.has_lower_triangle else TRANSPARENT)
    cmap.set_over(bins.upper_color if bins.has_upper_triangle else TRANSPARENT)
    cmap.set_bad(TRANSPARENT)

    boundaries = list(bins.finite_breaks)
    if not bins.has_upper_triangle:
        # top break is inclusive, as in classify_values()
        boundaries[-1] = float(np.nextafter(boundaries[-1], np.inf))

    norm = mcolors.BoundaryNorm(boundaries, ncolors=bins.n_bins)

    return cmap, norm
