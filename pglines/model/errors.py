class PgLinesError(Exception):
    """Base class for everything raised while loading lines."""


class UsageError(PgLinesError, ValueError):
    """The arguments are unusable before any query is sent, e.g. a bad table reference."""


class QueryError(PgLinesError):
    """The database rejected or failed one of the queries."""

    def __init__(self, sql, reason):
        PgLinesError.__init__(self, "Query failed: {0}\n{1}".format(reason, sql))
        self.sql = sql
        self.reason = reason


class MixedSridError(PgLinesError):
    """The geometry column does not hold exactly one SRID among its non null rows."""

    def __init__(self, table, geom, srids):
        if len(srids) == 0:
            msg = "No non null geometries in {0}.{1}, cannot determine a SRID".format(table, geom)
        else:
            msg = "Multiple SRIDs in the line geometry {0}.{1}: {2}".format(
                table, geom, ", ".join(str(s) for s in srids))

        PgLinesError.__init__(self, msg)
        self.table = table
        self.geom = geom
        self.srids = list(srids)


class GeometryParseError(PgLinesError, ValueError):
    """A WKT value could not be read as a line."""

    def __init__(self, gid, wkt, reason):
        PgLinesError.__init__(self, "Could not read geometry for id {0} as a line ({1}): {2}".format(
            gid, reason, wkt))
        self.gid = gid
        self.wkt = wkt
        self.reason = reason
