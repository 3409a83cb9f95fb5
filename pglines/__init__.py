import logging

# Handlers are left to the application, we only name the logger here.
DEFAULT_LOGGER = logging.getLogger('pglines')
DEFAULT_LOGGER.addHandler(logging.NullHandler())


from pglines.model.lines_dao import load_lines, LinesDAO  # noqa: E402
from pglines.model.line_collection import LineCollection, LineFeature  # noqa: E402
from pglines.model.errors import (PgLinesError, UsageError, QueryError,  # noqa: E402
                                  MixedSridError, GeometryParseError)
