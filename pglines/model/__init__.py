import functools
import pg8000
from pglines import DEFAULT_LOGGER
from pglines.config.db_config import db_config


def get_connection():
    return pg8000.connect(user=db_config["user"],
                          host=db_config["host"],
                          port=db_config["port"],
                          database=db_config["db_name"],
                          password=db_config["password"])


def with_pg_connection(function):
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        conn = None
        c = None
        try:
            # The caller might supply the connection themselves, in which case it stays open afterwards.
            if kwargs.get('connection') is None:
                conn = get_connection()
                kwargs['connection'] = conn

            if kwargs.get('cursor') is None:
                c = kwargs['connection'].cursor()
                kwargs['cursor'] = c

            return function(*args, **kwargs)
        except Exception as e:
            DEFAULT_LOGGER.error("Error running DB query: " + str(e))
            raise
        finally:
            if c is not None:
                c.close()

            if conn is not None:
                conn.close()

    return wrapper
