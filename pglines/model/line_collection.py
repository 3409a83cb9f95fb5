from collections import namedtuple
import geopandas as gpd
import pandas as pd


class LineFeature(namedtuple('LineFeature', ['id', 'geometry'])):
    """A line geometry paired with the identifier it was loaded under."""
    __slots__ = ()

    def __str__(self):
        return "{0}: {1}".format(self.id, self.geometry.wkt)


class LineCollection:
    """
    The result of loading a lines table.  Holds the features in the order the row query returned them, the
    coordinate reference system they all share, and optionally the attribute table (a pandas DataFrame indexed by
    the feature ids).
    """

    def __init__(self, features, crs, srid=None, attributes=None):
        self._features = tuple(features)
        self._crs = crs
        self._srid = srid

        if attributes is not None and len(attributes.index) != len(self._features):
            raise ValueError("Attribute rows do not line up with the line features")

        self._attributes = attributes

    @property
    def features(self):
        return self._features

    @property
    def crs(self):
        return self._crs

    @property
    def srid(self):
        return self._srid

    @property
    def attributes(self):
        # A copy, so the collection can't be changed through it
        return self._attributes.copy() if self._attributes is not None else None

    @property
    def has_attributes(self):
        return self._attributes is not None

    @property
    def ids(self):
        return [f.id for f in self._features]

    @property
    def geometries(self):
        return [f.geometry for f in self._features]

    def __len__(self):
        return len(self._features)

    def __iter__(self):
        return iter(self._features)

    def __getitem__(self, i):
        return self._features[i]

    def to_geodataframe(self):
        """
        Builds a GeoDataFrame out of the collection, with the attribute columns (if any), a geometry column and the
        feature ids as the index.
        :return: a geopandas.GeoDataFrame
        """
        index = pd.Index(self.ids, name='tgid')
        if self._attributes is not None:
            data = self._attributes.copy()
            data.index = index
        else:
            data = pd.DataFrame(index=index)

        return gpd.GeoDataFrame(data, geometry=gpd.GeoSeries(self.geometries, index=index), crs=self._crs)

    def __str__(self):
        return "LineCollection({0} lines, crs={1})".format(len(self), self._crs)
