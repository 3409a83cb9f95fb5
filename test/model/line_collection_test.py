import pandas as pd
import pytest
from pyproj import CRS
from shapely.geometry import LineString, MultiLineString

from pglines.model.line_collection import LineCollection, LineFeature


def make_features():
    return [LineFeature(10, LineString([(0, 0), (1, 1)])),
            LineFeature(20, MultiLineString([[(0, 0), (0, 1)], [(1, 1), (2, 2)]]))]


def test_line_feature_is_immutable():
    f = LineFeature(1, LineString([(0, 0), (1, 1)]))
    with pytest.raises(AttributeError):
        f.id = 2
    assert str(f) == "1: LINESTRING (0 0, 1 1)"


def test_collection_without_attributes():
    lc = LineCollection(make_features(), CRS.from_epsg(4326), 4326)
    assert len(lc) == 2
    assert lc.ids == [10, 20]
    assert lc[1].geometry.geom_type == "MultiLineString"
    assert not lc.has_attributes
    assert lc.attributes is None
    assert lc.srid == 4326
    assert [f.id for f in lc] == [10, 20]


def test_attributes_are_copied():
    attrs = pd.DataFrame({"name": ["a", "b"]}, index=pd.Index([10, 20], name="tgid"))
    lc = LineCollection(make_features(), CRS.from_epsg(4326), 4326, attrs)
    lc.attributes["name"] = ["x", "y"]
    assert list(lc.attributes["name"]) == ["a", "b"]


def test_attributes_must_line_up():
    attrs = pd.DataFrame({"name": ["a"]}, index=pd.Index([10], name="tgid"))
    with pytest.raises(ValueError):
        LineCollection(make_features(), None, None, attrs)


def test_to_geodataframe_with_attributes():
    attrs = pd.DataFrame({"name": ["a", "b"]}, index=pd.Index([10, 20], name="tgid"))
    gdf = LineCollection(make_features(), CRS.from_epsg(4269), 4269, attrs).to_geodataframe()
    assert list(gdf.index) == [10, 20]
    assert list(gdf["name"]) == ["a", "b"]
    assert gdf.crs.to_epsg() == 4269
    assert gdf.geometry.iloc[0].equals(LineString([(0, 0), (1, 1)]))


def test_to_geodataframe_geometry_only():
    gdf = LineCollection(make_features(), None).to_geodataframe()
    assert list(gdf.columns) == ["geometry"]
    assert gdf.crs is None
    assert len(gdf) == 2
