import os

db_config = {
    "user": os.environ.get("PGLINES_DB_USER", "postgres"),
    "host": os.environ.get("PGLINES_DB_HOST", "localhost"),
    "port": int(os.environ.get("PGLINES_DB_PORT", "5432")),
    "db_name": os.environ.get("PGLINES_DB_NAME", "gis"),
    "password": os.environ.get("PGLINES_DB_PASSWORD", "")
}
