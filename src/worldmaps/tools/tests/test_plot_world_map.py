"""pytest for worldmaps.tools.plot_world_map.py"""

import os
import sys
from unittest import mock

import matplotlib
import pytest

from worldmaps.legends.discrete_colorbar import ConfigurationError
from worldmaps.logging_funcs.logging import log_file_paths, remove_loggers
from worldmaps.tools.plot_world_map import main, parse_breaks, parse_colors

matplotlib.use("Agg")

# Mediterranean map without Natural Earth features, so no downloads are needed
OFFLINE_AREA = """
area_definition = {
    "use_definitions_from": "mediterranean",
    "long_name": "Mediterranean (no map features)",
    "draw_coastlines": False,
    "draw_borders": False,
    "draw_ocean": False,
}
"""

# Area between grid cells of the sample file, so contains no data
EMPTY_AREA = """
area_definition = {
    "use_definitions_from": "mediterranean",
    "long_name": "Empty area",
    "minlon": 1.0,
    "maxlon": 4.0,
    "minlat": 36.0,
    "maxlat": 39.0,
    "draw_coastlines": False,
    "draw_borders": False,
    "draw_ocean": False,
}
"""


@pytest.fixture(autouse=True)
def fixture_restore_logging():
    """remove tool log handlers and exception hook after each test"""
    excepthook = sys.excepthook
    yield
    remove_loggers("")
    sys.excepthook = excepthook


@pytest.fixture(name="offline_area")
def fixture_offline_area(tmp_path) -> str:
    """path of area definition file for an offline Mediterranean map"""
    area_file = tmp_path / "med_offline.py"
    area_file.write_text(OFFLINE_AREA)
    return str(area_file)


def run_tool(test_args: list[str]):
    """run the tool's main() with mocked command line args"""
    with mock.patch("sys.argv", ["plot_world_map.py"] + test_args):
        main(sys.argv[1:])


def test_parse_breaks():
    """infinite ends are allowed in break lists"""
    assert parse_breaks("-inf, 0,10.5,inf") == [float("-inf"), 0.0, 10.5, float("inf")]
    assert parse_breaks("1,+INF") == [1.0, float("inf")]

    with pytest.raises(ConfigurationError):
        parse_breaks("0,ten,20")


def test_parse_colors():
    """colors can be separated by commas or slashes"""
    assert parse_colors("navy, blue,red") == ["navy", "blue", "red"]
    assert parse_colors("#000080/#0000ff/red") == ["#000080", "#0000ff", "red"]


# Test various command line arg combinations complete successfully to produce a plot
# by checking that the "plot completed ok" string is output at the end.
@pytest.mark.parametrize(
    "test_args",
    [
        ["--breaks=-inf,38,42,inf", "-c", "navy,yellow,red", "-u", "degC"],
        ["--breaks=35,38,42,46", "-c", "navy/yellow/red", "--spacing", "natural"],
        ["-n", "4", "--extend", "both", "-cm", "viridis", "-r", "-ld", "vertical"],
        ["-n", "3", "--min", "30", "--max", "48", "-c", "navy,yellow,red", "-t", "SST"],
        ["--breaks=-inf,40,44,inf", "-of", "my_plot", "-lp", "0", "--dpi", "50"],
    ],
)
def test_plot_world_map(capsys, tmp_path, sample_netcdf, offline_area, test_args):
    """tool runs load, clip, plot and save with various settings"""
    run_tool(
        ["-f", sample_netcdf, "-p", "sst", "-df", offline_area, "-od", str(tmp_path)]
        + test_args
    )

    captured = capsys.readouterr()
    assert "plot completed ok" in captured.out.strip()

    if "-of" in test_args:
        assert os.path.isfile(tmp_path / "my_plot.png")
    else:
        assert os.path.isfile(tmp_path / "sst_med_offline.png")

    # log files go to the output directory by default
    assert os.path.isfile(log_file_paths(str(tmp_path), "plot_world_map")["info"])


def test_plot_world_map_log_dir(tmp_path, sample_netcdf, offline_area):
    """log files are written to --log_dir"""
    log_dir = tmp_path / "logs"
    run_tool(
        [
            "-f", sample_netcdf,
            "-p", "sst",
            "-df", offline_area,
            "-od", str(tmp_path),
            "--breaks=35,40,46",
            "--log_dir", str(log_dir),
        ]
    )  # fmt: skip

    remove_loggers("")
    with open(log_file_paths(str(log_dir), "plot_world_map")["info"], encoding="utf-8") as f:
        assert "plot completed ok" in f.read()


def test_list_areas(capsys, tmp_path):
    """--list_areas prints the area definitions"""
    run_tool(["--list_areas", "--log_dir", str(tmp_path)])

    captured = capsys.readouterr()
    assert "mediterranean" in captured.out
    assert "Mediterranean Sea" in captured.out


@pytest.mark.parametrize(
    "test_args",
    [
        # missing --param
        ["--breaks=35,40,46"],
        # colors don't match bins
        ["-p", "sst", "--breaks=-inf,38,42,inf", "-c", "navy,red"],
        # natural spacing with open ended bins
        ["-p", "sst", "--breaks=-inf,38,42,inf", "--spacing", "natural"],
        # breaks not increasing
        ["-p", "sst", "--breaks=35,42,38"],
        # unknown variable
        ["-p", "no_such_param", "--breaks=35,40,46"],
        # unknown colormap
        ["-p", "sst", "-n", "3", "-cm", "not_a_cmap"],
    ],
)
def test_plot_world_map_bad_input(tmp_path, sample_netcdf, offline_area, test_args):
    """bad input exits with an error message and no plot"""
    with pytest.raises(SystemExit) as excinfo:
        run_tool(["-f", sample_netcdf, "-df", offline_area, "-od", str(tmp_path)] + test_args)

    assert excinfo.value.code != 0
    assert not list(tmp_path.glob("*.png"))


def test_plot_world_map_missing_file(tmp_path, offline_area):
    """a missing input file exits with an error"""
    with pytest.raises(SystemExit) as excinfo:
        run_tool(["-f", str(tmp_path / "missing.nc"), "-p", "sst", "-df", offline_area])

    assert "missing.nc" in str(excinfo.value.code)


def test_plot_world_map_bad_area(tmp_path, sample_netcdf):
    """an unknown area name exits with an error"""
    with pytest.raises(SystemExit) as excinfo:
        run_tool(["-f", sample_netcdf, "-p", "sst", "-a", "atlantis", "-od", str(tmp_path)])

    assert "atlantis" in str(excinfo.value.code)


def test_plot_world_map_no_data_in_area(tmp_path, sample_netcdf):
    """an area containing no grid cells exits with an error"""
    area_file = tmp_path / "empty_area.py"
    area_file.write_text(EMPTY_AREA)

    with pytest.raises(SystemExit) as excinfo:
        run_tool(["-f", sample_netcdf, "-p", "sst", "-df", str(area_file), "-od", str(tmp_path)])

    assert "No valid sst data" in str(excinfo.value.code)


@pytest.mark.requires_external_data
def test_plot_world_map_with_map_features(capsys, tmp_path, sample_netcdf):
    """standard area with Natural Earth coastlines, borders and ocean"""
    run_tool(
        ["-f", sample_netcdf, "-p", "sst", "-a", "mediterranean", "-od", str(tmp_path),
         "--breaks=-inf,38,42,inf"]
    )  # fmt: skip

    assert "plot completed ok" in capsys.readouterr().out
    assert os.path.isfile(tmp_path / "sst_mediterranean.png")
