import pytest


class FakeCursor:
    """Answers the SRID probe and the lines query with canned rows, and remembers every statement."""

    def __init__(self, connection):
        self.connection = connection
        self.description = None
        self.results = None
        self.closed = False

    def execute(self, sql):
        self.connection.executed.append(sql)
        if self.connection.error is not None and self.connection.error_on in sql:
            raise self.connection.error

        if "ST_SRID" in sql:
            self.description = [("st_srid", 23, None, None, None, None, None)]
            self.results = [[s] for s in self.connection.srids]
        else:
            self.description = [(col, 25, None, None, None, None, None) for col in self.connection.columns]
            self.results = [list(r) for r in self.connection.rows]

    def fetchall(self):
        return self.results

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, srids=(4326,), columns=("tgid", "wkt"), rows=(), error=None, error_on=""):
        self.srids = list(srids)
        self.columns = list(columns)
        self.rows = list(rows)
        self.error = error
        self.error_on = error_on
        self.executed = []
        self.cursors = []
        self.closed = False

    def cursor(self):
        c = FakeCursor(self)
        self.cursors.append(c)
        return c

    def close(self):
        self.closed = True


@pytest.fixture
def fake_connection():
    return FakeConnection
