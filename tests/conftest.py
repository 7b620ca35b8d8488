import os
import re
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root on sys.path
_THIS_DIR = Path(__file__).resolve().parent
_PROJECT_ROOT = _THIS_DIR.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# Keep test runs from writing hotel.log into the working directory
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "hotel_tests.log"))

from db import connection  # noqa: E402
from utils.console import Console  # noqa: E402


def _squash(sql: str) -> str:
    return re.sub(r"\s+", " ", sql).strip()


class FakeCursor:
    """Cursor that replays the responses queued on its FakeConnection."""

    def __init__(self, conn):
        self.conn = conn
        self.description = None
        self.rowcount = -1
        self._rows = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((_squash(sql), None if params is None else tuple(params)))
        if self.conn.errors:
            raise self.conn.errors.pop(0)
        columns, rows, rowcount = self.conn.next_response()
        self.description = [(c, None, None, None, None, None, None) for c in columns] or None
        self._rows = list(rows)
        self.rowcount = len(self._rows) if rowcount is None else rowcount

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None


class FakeConnection:
    """Stands in for a psycopg2 connection; records SQL and transaction calls."""

    def __init__(self):
        self.executed = []
        self.responses = []
        self.errors = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def queue(self, columns=(), rows=(), rowcount=None):
        self.responses.append((list(columns), list(rows), rowcount))
        return self

    def fail_next(self, error):
        self.errors.append(error)
        return self

    def next_response(self):
        if self.responses:
            return self.responses.pop(0)
        return [], [], 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True

    @property
    def statements(self):
        return [sql for sql, _ in self.executed]


@pytest.fixture()
def fake_db():
    conn = FakeConnection()
    connection.set_connection(conn)
    yield conn
    connection.set_connection(None)


class ScriptedConsole(Console):
    """Console fed from a list of input lines; collects everything printed."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []
        super().__init__(input_fn=self._next_line, output_fn=self.output.append)

    def _next_line(self, prompt):
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture()
def make_console():
    return ScriptedConsole
