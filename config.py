"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
Command-line arguments given to main.py take precedence over the
database values defined here.
"""

import os
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "hotel")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE: str = os.getenv("LOG_FILE", "hotel.log")

# ── Menu behaviour ────────────────────────────────────────
HOTEL_SEARCH_RADIUS: float = float(os.getenv("HOTEL_SEARCH_RADIUS", "30"))
RECENT_LIMIT: int = int(os.getenv("RECENT_LIMIT", "5"))

# ── Exports ───────────────────────────────────────────────
EXPORT_DIR: str = os.getenv("EXPORT_DIR", "exports")


def build_dsn(
    dbname: str = DB_NAME,
    port: int | str = DB_PORT,
    user: str = DB_USER,
    password: str = DB_PASS,
    host: str = DB_HOST,
) -> str:
    """Build a libpq connection URL from its parts."""
    auth = quote(user, safe="")
    if password:
        auth += ":" + quote(password, safe="")
    return f"postgresql://{auth}@{host}:{port}/{quote(dbname, safe='')}"

