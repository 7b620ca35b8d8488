"""
db/connection.py
----------------
Manages the single PostgreSQL connection used by the console.
The connection is opened once at startup and closed on shutdown.
"""

import psycopg2

from config import DB_HOST, build_dsn
from utils.logger import get_logger

logger = get_logger(__name__)

_connection = None


def init_connection(
    dbname: str, port: int | str, user: str, password: str = "", host: str = DB_HOST
) -> None:
    """
    Open the database connection.

    Args:
        dbname: Name of the database.
        port: Port the PostgreSQL server listens on.
        user: Login role.
        password: Login password (empty for trust/peer auth).
        host: Server hostname.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _connection
    if _connection is not None:
        return
    dsn = build_dsn(dbname, port, user, password, host)
    try:
        _connection = psycopg2.connect(dsn)
        logger.info(f"Connected to {host}:{port}/{dbname} as {user}.")
    except psycopg2.OperationalError as e:
        logger.error(f"Unable to connect to database: {e}")
        raise


def set_connection(conn) -> None:
    """Install an already-open DB-API connection (used by scripts and tests)."""
    global _connection
    _connection = conn


def get_connection():
    """
    Get the open connection.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the connection has not been opened.
    """
    if _connection is None:
        raise RuntimeError("Database connection not initialized. Call init_connection() first.")
    return _connection


def close_connection() -> None:
    """Close the connection if it is open."""
    global _connection
    if _connection is not None:
        try:
            _connection.close()
        except psycopg2.Error as e:
            logger.warning(f"Error while closing connection: {e}")
        _connection = None
        logger.info("Database connection closed.")
