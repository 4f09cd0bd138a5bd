"""pytests for worldmaps.areas.areas.py
"""

import numpy as np
import polars as pl
import pytest

from worldmaps.areas.areas import (
    Area,
    list_all_area_definition_names,
    list_all_area_definition_names_only,
)


def test_bad_area_name():
    """pytest to check for handling of invalid area names"""
    with pytest.raises(ImportError):
        Area("badname")


def test_good_area_name():
    """pytest to check all area definitions load and have valid bounds"""

    area_list = list_all_area_definition_names_only()

    assert "global" in area_list
    assert "mediterranean" in area_list

    for area in area_list:
        thisarea = Area(area)
        assert thisarea.long_name
        assert len(thisarea.extent) == 4


def test_list_all_area_definition_names():
    """area listing includes the long name and bounding box"""
    names = list_all_area_definition_names()

    med = [name for name in names if "mediterranean" in name]
    assert len(med) == 1
    assert "Mediterranean Sea" in med[0]
    assert "[-6.0,37.0,30.0,46.0]" in med[0]


def test_use_definitions_from():
    """definitions inherit settings from the area they are based on"""
    europe = Area("europe")
    med = Area("mediterranean")

    # set in mediterranean
    assert med.projection == "PlateCarree"
    assert med.legend_direction == "horizontal"
    assert med.cmap_name == "viridis"
    # inherited from europe
    assert med.draw_borders == europe.draw_borders
    assert med.ocean_color == europe.ocean_color

    # two levels : south_america -> africa -> europe
    south_america = Area("south_america")
    africa = Area("africa")
    assert south_america.projection == africa.projection
    assert south_america.minlat == -57.0
    assert south_america.coastline_color == europe.coastline_color


def test_area_overrides():
    """overrides replace definition settings"""
    thisarea = Area("mediterranean", {"maxlat": 44.0, "legend_direction": "vertical"})

    assert thisarea.maxlat == 44.0
    assert thisarea.legend_direction == "vertical"
    assert thisarea.minlat == 30.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"minlat": 50.0, "maxlat": 40.0},
        {"minlon": 10.0, "maxlon": -10.0},
        {"maxlat": 95.0},
        {"minlon": -200.0},
        {"projection": "Orthographic"},
    ],
)
def test_bad_bounds(overrides):
    """inverted or out of range bounding boxes and unknown projections are rejected"""
    with pytest.raises(ValueError):
        Area("mediterranean", overrides)


def test_area_from_file(tmp_path):
    """areas can be loaded from a definition file outside the package"""
    area_file = tmp_path / "my_region.py"
    area_file.write_text(
        "area_definition = {\n"
        '    "use_definitions_from": "europe",\n'
        '    "long_name": "My region",\n'
        '    "minlon": 0.0,\n'
        '    "maxlon": 10.0,\n'
        '    "minlat": 40.0,\n'
        '    "maxlat": 50.0,\n'
        "}\n"
    )

    thisarea = Area("ignored", area_filename=str(area_file))

    assert thisarea.name == "my_region"
    assert thisarea.long_name == "My region"
    assert thisarea.extent == [0.0, 10.0, 40.0, 50.0]
    assert thisarea.projection == Area("europe").projection


def test_inside_latlon_bounds():
    """pytest to check for Area.inside_latlon_bounds()"""
    thisarea = Area("mediterranean")

    lats = np.array([38.0, 38.0, 60.0, 30.0])
    lons = np.array([15.0, -20.0, 15.0, 37.0])

    bool_mask, n_inside = thisarea.inside_latlon_bounds(lats, lons)

    assert n_inside == 2
    np.testing.assert_array_equal(bool_mask, [True, False, False, True])

    # scalar input
    bool_mask, n_inside = thisarea.inside_latlon_bounds(38.0, 15.0)
    assert n_inside == 1
    assert bool_mask.shape == (1,)


@pytest.mark.parametrize("lazy", [False, True])
def test_inside_latlon_bounds_polars(lazy):
    """pytest to check for Area.inside_latlon_bounds_polars()"""
    thisarea = Area("mediterranean")

    df = pl.DataFrame(
        {
            "lat": [38.0, 38.0, 60.0, 30.0],
            "lon": [15.0, -20.0, 15.0, 37.0],
            "val": [1.0, 2.0, 3.0, 4.0],
        }
    )
    if lazy:
        df = df.lazy()

    out = thisarea.inside_latlon_bounds_polars(df, "lat", "lon", return_pl_dataframe=True)

    assert isinstance(out, pl.DataFrame)
    assert out["val"].to_list() == [1.0, 4.0]

    if lazy:
        still_lazy = thisarea.inside_latlon_bounds_polars(df, "lat", "lon")
        assert isinstance(still_lazy, pl.LazyFrame)
