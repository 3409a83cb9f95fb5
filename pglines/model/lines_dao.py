import pg8000
import pandas as pd
import shapely.wkt
from pyproj import CRS
from shapely.errors import ShapelyError
from shapely.geometry import LineString, MultiLineString
from pglines import DEFAULT_LOGGER
from pglines.model import with_pg_connection
from pglines.model.errors import UsageError, QueryError, MixedSridError, GeometryParseError
from pglines.model.line_collection import LineCollection, LineFeature

ROW_NUMBER_GID = "row_number() over()"


def get_table_name(table):
    """
    Turns "table", "schema.table", ("table",) or ("schema", "table") into the dotted name used in the queries.
    :raises UsageError: if the reference doesn't have exactly one or two non empty parts
    """
    if isinstance(table, str):
        parts = table.split(".")
    else:
        try:
            parts = [str(p) for p in table]
        except TypeError:
            raise UsageError("The table name should be \"table\" or (\"schema\", \"table\"), got {0!r}".format(table))

    if len(parts) not in (1, 2) or any(p.strip() == "" for p in parts):
        raise UsageError("The table name should be \"table\" or (\"schema\", \"table\"), got {0!r}".format(table))

    return ".".join(parts)


def get_crs_from_srid(srid):
    # 0 is what PostGIS stores when no SRID was given
    if srid is None or int(srid) == 0:
        return None
    return CRS.from_epsg(int(srid))


def read_line(gid, wkt):
    try:
        geom = shapely.wkt.loads(wkt)
    except (ShapelyError, TypeError) as e:
        raise GeometryParseError(gid, wkt, str(e)) from e

    if not isinstance(geom, (LineString, MultiLineString)):
        raise GeometryParseError(gid, wkt, "{0} is not a line geometry".format(geom.geom_type))

    return geom


def execute(cursor, sql, db_errors=(pg8000.Error,)):
    DEFAULT_LOGGER.debug("Executing: " + sql)
    try:
        cursor.execute(sql)
        return cursor.fetchall()
    except db_errors as e:
        raise QueryError(sql, str(e)) from e


class LinesDAO:
    @staticmethod
    def srid_query(table_name, geom):
        return "SELECT DISTINCT(ST_SRID({0})) FROM {1} WHERE {0} IS NOT NULL;".format(geom, table_name)

    @staticmethod
    def lines_query(table_name, geom="geom", gid=None, other_cols="*", query=None):
        sql_string = "SELECT {0} AS tgid, ST_AsText({1}) AS wkt".format(gid if gid is not None else ROW_NUMBER_GID,
                                                                         geom)
        if other_cols is not None:
            sql_string += ", " + other_cols

        sql_string += " FROM {0} WHERE {1} IS NOT NULL".format(table_name, geom)
        if query is not None:
            sql_string += " " + query

        return sql_string + ";"

    @staticmethod
    @with_pg_connection
    def load_lines(table, geom="geom", gid=None, other_cols="*", query=None, **kwargs):
        """
        Loads the line geometries of a PostGIS table into a LineCollection.

        other_cols and query are put into the SQL exactly as given, nothing is escaped.  Never pass them through from
        an untrusted source.

        :param table: "table", "schema.table" or ("schema", "table")
        :param geom: name of the geometry column
        :param gid: name of a column holding the line ids, should be unique if attributes are loaded too.  None numbers
            the rows 1..N in the order the database returns them
        :param other_cols: comma separated columns to load as attributes, "*" for all of them, None for no attributes
        :param query: extra SQL appended after the "geom IS NOT NULL" condition, e.g. "AND rttyp = 'I'"
        :return: a LineCollection
        """
        c = kwargs['cursor']
        conn = kwargs['connection']
        table_name = get_table_name(table)

        db_errors = (pg8000.Error,)
        conn_error = getattr(type(conn), 'Error', None)
        if isinstance(conn_error, type) and issubclass(conn_error, Exception):
            db_errors += (conn_error,)

        srids = [row[0] for row in execute(c, LinesDAO.srid_query(table_name, geom), db_errors)]
        if len(srids) != 1:
            raise MixedSridError(table_name, geom, srids)

        srid = srids[0]
        crs = get_crs_from_srid(srid)

        rows = execute(c, LinesDAO.lines_query(table_name, geom, gid, other_cols, query), db_errors)
        columns = [d[0] for d in c.description] if c.description is not None else ["tgid", "wkt"]

        features = []
        for row in rows:
            tgid, wkt = row[0], row[1]
            features.append(LineFeature(tgid, read_line(tgid, wkt)))

        DEFAULT_LOGGER.info("Loaded {0} lines from {1} (SRID {2})".format(len(features), table_name, srid))

        if other_cols is None:
            return LineCollection(features, crs, srid)

        attributes = pd.DataFrame([list(row) for row in rows], columns=columns)
        attributes = attributes.drop(columns=[col for col in (geom, "wkt") if col in attributes.columns])
        attributes = attributes.set_index("tgid")
        return LineCollection(features, crs, srid, attributes)


def load_lines(connection, table, geom="geom", gid=None, other_cols="*", query=None):
    """
    Loads the line geometries of a PostGIS table through the given connection, see LinesDAO.load_lines.  The
    connection is left open.
    """
    return LinesDAO.load_lines(table, geom=geom, gid=gid, other_cols=other_cols, query=query, connection=connection)
