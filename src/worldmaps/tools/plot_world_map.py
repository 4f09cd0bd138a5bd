#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tool to plot a gridded NetCDF parameter on a selectable global or regional map,
binned into discrete colors with a discrete color legend.

For full list of command line args:

`plot_world_map.py --help`

## Examples

List all available area definitions (ie the areas you can select to plot your data on):

`plot_world_map.py --list_areas`

Plot parameter **analysed_sst** on the Mediterranean map, with open ended bins below
14 and above 28 degC and colors sampled from the area's colormap:

`plot_world_map.py -f sst_2020_01.nc -p analysed_sst -a mediterranean \
    --breaks=-inf,14,18,22,26,28,inf -u degC -od /tmp`

Plot on the global map with 4 regular bins between the data minimum and maximum,
an open top bin and colors given explicitly:

`plot_world_map.py -f chl.nc -p chlor_a -a global -n 4 --extend max \
    -c navy/teal/yellow/orange/red`
"""

__all__ = ["main"]

import argparse
import dataclasses
import logging
import math
import os
import sys

import numpy as np

from worldmaps.areas.areas import Area, list_all_area_definition_names
from worldmaps.areas.map_plot import Worldplot
from worldmaps.binning.binning import VALID_EXTENDS, classify_values, regular_breaks
from worldmaps.gridded.gridded import VAL_COL, clip_to_area, read_gridded_netcdf
from worldmaps.legends.discrete_colorbar import (
    VALID_DIRECTIONS,
    VALID_SPACINGS,
    ConfigurationError,
)
from worldmaps.logging_funcs.logging import exception_hook, set_loggers

# pylint: disable=too-many-branches
# pylint: disable=too-many-statements
# pylint: disable=too-many-locals

log = logging.getLogger(__name__)

# Colour constants for highlighting terminal output text
RED = "\033[0;31m"  # pylint: disable=invalid-name
BLUE = "\033[0;34m"  # pylint: disable=invalid-name
NC = "\033[0m"  # No Color, pylint: disable=invalid-name

INFINITY_STRINGS = {"-inf": -math.inf, "inf": math.inf, "+inf": math.inf}


def parse_breaks(breaks_str: str) -> list[float]:
    """Parse a comma separated list of bin breaks

    Args:
        breaks_str (str): example '-inf,0,10,20,inf'

    Returns:
        list[float]: breaks

    Raises:
        ConfigurationError: if any value is not a number
    """
    breaks = []
    for item in breaks_str.split(","):
        item = item.strip().lower()
        if item in INFINITY_STRINGS:
            breaks.append(INFINITY_STRINGS[item])
            continue
        try:
            breaks.append(float(item))
        except ValueError as exc:
            raise ConfigurationError("breaks", f"{item!r} is not a number") from exc
    return breaks


def parse_colors(colors_str: str) -> list[str]:
    """Parse a list of colors separated by ',' or '/'

    Slashes allow hex colors and rgb strings containing commas to be avoided,
    eg 'navy/#00ff00/red'.

    Args:
        colors_str (str): color list string

    Returns:
        list[str]: color names
    """
    sep = "/" if "/" in colors_str else ","
    return [color.strip() for color in colors_str.split(sep) if color.strip()]


def log_bin_counts(vals: np.ndarray, breaks: list[float]):
    """Log the number of values in each bin, and outside all bins

    Args:
        vals (np.ndarray): values to be plotted
        breaks (list[float]): bin breaks
    """
    bins = classify_values(vals, breaks)
    n_bins = len(breaks) - 1
    counts = np.bincount(bins[bins >= 0], minlength=n_bins)
    for i in range(n_bins):
        log.info("bin %d [%s, %s] : %d values", i, breaks[i], breaks[i + 1], counts[i])
    n_outside = np.count_nonzero(bins < 0)
    if n_outside:
        log.info("%d values are NaN or outside all bins (not plotted)", n_outside)


def main(args):
    """main function of tool

    Returns:
        None
    """

    # ----------------------------------------------------------------------
    # Process Command Line Arguments for tool
    # ----------------------------------------------------------------------

    # initiate the command line parser
    parser = argparse.ArgumentParser(
        description=(
            "Tool to plot a gridded netcdf parameter on global or regional maps"
            " using the worldmaps area definitions, with values binned into"
            " discrete colors and a discrete color legend"
        )
    )

    parser.add_argument(
        "--area",
        "-a",
        help=("area definition name. See --list_areas for a full list. Default is global"),
        required=False,
        default="global",
    )

    parser.add_argument(
        "--areadef_file",
        "-df",
        help=(
            "[optional] path of area definition file. "
            "Not necessary if using standard area definitions in worldmaps.areas.definitions."
            " Can be used instead of standard area definitions"
        ),
        required=False,
    )

    parser.add_argument(
        "--breaks",
        "-b",
        help=(
            "[optional] comma separated list of bin breaks, strictly increasing."
            " First may be -inf and last may be inf for open ended bins."
            " Example: --breaks=-inf,0,10,20,inf. If not set, regular breaks are made from"
            " --nbins, --min, --max and --extend"
        ),
        required=False,
    )

    parser.add_argument(
        "--cmap",
        "-cm",
        help=("[optional] colourmap name to sample bin colors from. Default is the area's"),
        required=False,
    )

    parser.add_argument(
        "--colors",
        "-c",
        help=(
            "[optional] list of bin colors separated by ',' or '/'. One per bin, or one per"
            " bin plus one for each open ended bin. Overrides --cmap"
        ),
        required=False,
    )

    parser.add_argument(
        "--dpi",
        "-dpi",
        help=("[Optional, int] set the dpi to use when writing to an image file."),
        type=int,
        required=False,
    )

    parser.add_argument(
        "--extend",
        "-e",
        help=("[optional] open ended bins to add to regular breaks. Default is neither"),
        required=False,
        default="neither",
        choices=VALID_EXTENDS,
    )

    parser.add_argument(
        "--file",
        "-f",
        help=("path of input netcdf file"),
        required=False,
    )

    parser.add_argument(
        "--label_precision",
        "-lp",
        help=("[optional, int] number of decimal places in legend labels. Default is 2"),
        type=int,
        required=False,
    )

    parser.add_argument(
        "--lat_name",
        help=("[optional] name of latitude variable. Default is found automatically"),
        required=False,
    )

    parser.add_argument(
        "--legend_direction",
        "-ld",
        help=("[optional] legend direction. Default is the area's"),
        required=False,
        choices=VALID_DIRECTIONS,
    )

    parser.add_argument(
        "--list_areas",
        "-la",
        help=("list all available area definitions"),
        required=False,
        action="store_true",
    )

    parser.add_argument(
        "--log_dir",
        help=("[optional] directory for log files. Default is the output directory or /tmp"),
        required=False,
    )

    parser.add_argument(
        "--lon_name",
        help=("[optional] name of longitude variable. Default is found automatically"),
        required=False,
    )

    parser.add_argument(
        "--max",
        help=("[optional, float] highest finite break for regular breaks. Default is data max"),
        type=float,
        required=False,
    )

    parser.add_argument(
        "--min",
        help=("[optional, float] lowest finite break for regular breaks. Default is data min"),
        type=float,
        required=False,
    )

    parser.add_argument(
        "--nbins",
        "-n",
        help=("[optional, int] number of finite bins for regular breaks. Default is 10"),
        type=int,
        required=False,
        default=10,
    )

    parser.add_argument(
        "--outdir",
        "-od",
        help=("[optional] output directory for plot. Default is current directory"),
        required=False,
        default=".",
    )

    parser.add_argument(
        "--outfile",
        "-of",
        help=("[optional] output file name for plot. Default is <param>_<area>.png"),
        required=False,
    )

    parser.add_argument(
        "--param",
        "-p",
        help=("netcdf parameter to plot, with optional group path (e.g. 'group/param')"),
        required=False,
    )

    parser.add_argument(
        "--reverse_colors",
        "-r",
        help=("reverse the order of the bin colors"),
        required=False,
        action="store_true",
    )

    parser.add_argument(
        "--spacing",
        "-s",
        help=(
            "[optional] legend bin spacing. constant: equal size bins, natural: bin size"
            " proportional to bin width (not with open ended bins). Default is the area's"
        ),
        required=False,
        choices=VALID_SPACINGS,
    )

    parser.add_argument(
        "--title",
        "-t",
        help=("[optional] legend title. Default is the parameter name"),
        required=False,
    )

    parser.add_argument(
        "--units",
        "-u",
        help=("[optional] units of parameter, shown in legend title. Default is none"),
        required=False,
    )

    args = parser.parse_args(args)

    # -----------------------------------------------------------------------------
    #  Set up logging
    # -----------------------------------------------------------------------------
    log_dir = args.log_dir if args.log_dir else (args.outdir if args.outdir else "/tmp")
    set_loggers(log_dir=log_dir, tool_name="plot_world_map", print_log_files=False)
    sys.excepthook = exception_hook

    if args.list_areas:
        for area_str in list_all_area_definition_names():
            print(area_str)
        return

    if not args.file:
        sys.exit(f"{RED}--file (-f) is required{NC}")
    if not args.param:
        sys.exit(f"{RED}--param (-p) is required{NC}")

    # -----------------------------------------------------------------------------
    #  Load and clip data
    # -----------------------------------------------------------------------------
    try:
        thisarea = Area(args.area, area_filename=args.areadef_file)
    except (ImportError, ValueError) as exc:
        log.error("Invalid area %s : %s", args.area, exc)
        sys.exit(f"{RED}Invalid area {args.area} : {exc}. See --list_areas{NC}")

    try:
        df = read_gridded_netcdf(args.file, args.param, args.lat_name, args.lon_name)
    except (FileNotFoundError, KeyError, ValueError) as exc:
        log.error("Could not read %s from %s : %s", args.param, args.file, exc)
        sys.exit(f"{RED}Could not read {args.param} from {args.file} : {exc}{NC}")

    df = clip_to_area(df, thisarea)
    vals = df[VAL_COL].to_numpy()
    if df.height == 0 or np.all(np.isnan(vals)):
        log.error("No valid data inside area %s", thisarea.name)
        sys.exit(f"{RED}No valid {args.param} data inside area {thisarea.name}{NC}")

    # -----------------------------------------------------------------------------
    #  Breaks, colors and legend settings
    # -----------------------------------------------------------------------------
    worldplot = Worldplot(args.area, area_file=args.areadef_file)

    dataset = {
        "df": df,
        "name": args.param.split("/")[-1],
        "units": args.units if args.units is not None else "",
    }
    if args.cmap:
        dataset["cmap_name"] = args.cmap

    try:
        if args.breaks:
            breaks = parse_breaks(args.breaks)
        else:
            vmin = args.min if args.min is not None else float(np.nanmin(vals))
            vmax = args.max if args.max is not None else float(np.nanmax(vals))
            breaks = regular_breaks(vmin, vmax, args.nbins, args.extend)
        log.info("breaks : %s", breaks)

        colors = parse_colors(args.colors) if args.colors else None

        legend_config = worldplot.make_legend_config(dataset, None)
        legend_overrides: dict = {"reverse": args.reverse_colors}
        if args.title is not None:
            legend_overrides["title"] = args.title
        if args.legend_direction:
            legend_overrides["direction"] = args.legend_direction
        if args.spacing:
            legend_overrides["spacing"] = args.spacing
        if args.label_precision is not None:
            legend_overrides["label_precision"] = args.label_precision
        legend_config = dataclasses.replace(legend_config, **legend_overrides)

        log_bin_counts(vals, breaks)

        plot_file = worldplot.plot_grid(
            dataset,
            breaks,
            colors,
            legend_config=legend_config,
            output_dir=args.outdir,
            output_file=args.outfile if args.outfile else "",
            dpi=args.dpi,
        )
    except ConfigurationError as exc:
        log.error("Invalid legend settings : %s", exc)
        sys.exit(f"{RED}Invalid legend settings : {exc}{NC}")

    print(f"plot saved to {BLUE}{os.path.abspath(str(plot_file))}{NC}")
    log.info("plot completed ok")


def cli():
    """console script entry point"""
    main(sys.argv[1:])


if __name__ == "__main__":
    main(sys.argv[1:])
