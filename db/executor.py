"""
db/executor.py
--------------
Thin query-execution wrapper over the open connection.
Runs a statement, commits or rolls back, and marshals result sets into rows.

Every helper takes a SQL string with ``%s`` placeholders and a parameter
sequence; values supplied by users are never formatted into the SQL text.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class QueryResult:
    """Column names plus the row tuples returned by a SELECT."""
    columns: list[str]
    rows: list[tuple] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def as_dicts(self) -> list[dict]:
        return [dict(zip(self.columns, row)) for row in self.rows]


def _column_names(cur) -> list[str]:
    return [col[0] for col in (cur.description or [])]


def execute_update(sql: str, params: Optional[Sequence[Any]] = None) -> int:
    """
    Execute a CREATE, INSERT, UPDATE, DELETE or DROP statement.

    Returns:
        Number of rows affected (-1 for DDL).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            affected = cur.rowcount
        conn.commit()
        return affected
    except Exception as e:
        conn.rollback()
        logger.error(f"Update failed: {e}")
        raise


def execute_returning(sql: str, params: Optional[Sequence[Any]] = None) -> Optional[tuple]:
    """Execute an INSERT ... RETURNING statement, commit, and return the first row."""
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            row = cur.fetchone()
        conn.commit()
        return row
    except Exception as e:
        conn.rollback()
        logger.error(f"Insert failed: {e}")
        raise


def execute_query(sql: str, params: Optional[Sequence[Any]] = None) -> QueryResult:
    """
    Execute a SELECT and return its columns and rows.

    The read transaction is closed with a rollback so the connection never
    idles inside an open transaction.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(sql, params)
            result = QueryResult(columns=_column_names(cur), rows=list(cur.fetchall()))
        conn.rollback()
        return result
    except Exception as e:
        conn.rollback()
        logger.error(f"Query failed: {e}")
        raise


def execute_query_as_strings(
    sql: str, params: Optional[Sequence[Any]] = None
) -> list[list[Optional[str]]]:
    """Execute a SELECT and return each record as a list of string values."""
    result = execute_query(sql, params)
    return [
        [None if value is None else str(value) for value in row]
        for row in result.rows
    ]


def count_rows(sql: str, params: Optional[Sequence[Any]] = None) -> int:
    """Return the number of rows a SELECT yields."""
    return len(execute_query(sql, params).rows)


def fetch_scalar(sql: str, params: Optional[Sequence[Any]] = None) -> Any:
    """Return the first column of the first row, or None when there are no rows."""
    result = execute_query(sql, params)
    if result.rows:
        return result.rows[0][0]
    return None


def execute_query_and_print(
    sql: str,
    params: Optional[Sequence[Any]] = None,
    out: Callable[[str], None] = print,
) -> int:
    """
    Execute a SELECT and write the result tab-separated to ``out``.

    The header line is only written when at least one row exists.

    Returns:
        The number of rows printed.
    """
    result = execute_query(sql, params)
    if result.rows:
        out("\t".join(result.columns))
    for row in result.rows:
        out("\t".join("null" if v is None else str(v) for v in row))
    return len(result.rows)


def get_current_seq_value(sequence: str) -> int:
    """Return the last value handed out by a sequence, or -1 if it has none."""
    value = fetch_scalar("SELECT last_value FROM pg_sequences WHERE sequencename = %s;", (sequence.lower(),))
    return int(value) if value is not None else -1
