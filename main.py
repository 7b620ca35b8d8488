"""
main.py
-------
Entry point for the hotel booking console.

Usage:
    python main.py <dbname> <port> <user> [--password PASS] [--host HOST]

Responsibilities:
    - Parse the command line.
    - Open the database connection.
    - Run the interactive menus.
    - Close the connection on exit, whatever happened.
"""

import argparse
import sys
from typing import Optional, Sequence

import psycopg2

from config import DB_HOST, DB_PASS
from db.connection import close_connection, init_connection
from handlers.menu import run_main_menu
from utils.console import Console
from utils.logger import get_logger

logger = get_logger(__name__)

GREETING = (
    "\n\n*******************************************************\n"
    "              User Interface                           \n"
    "*******************************************************\n"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hotel",
        description="Console client for the hotel booking database.",
    )
    parser.add_argument("dbname", help="name of the PostgreSQL database")
    parser.add_argument("port", type=int, help="port the PostgreSQL server listens on")
    parser.add_argument("user", help="database login role")
    parser.add_argument("--password", default=DB_PASS, help="database password (default: $DB_PASS)")
    parser.add_argument("--host", default=DB_HOST, help="database host (default: $DB_HOST)")
    return parser


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Run the console; returns the process exit code."""
    args = build_parser().parse_args(argv)
    console = console or Console()

    console.say(GREETING)
    console.say("Connecting to database...")
    try:
        init_connection(args.dbname, args.port, args.user, args.password, args.host)
    except psycopg2.OperationalError as e:
        print(f"Error - Unable to Connect to Database: {e}", file=sys.stderr)
        console.say("Make sure you started postgres on this machine")
        return 1
    console.say(f"Connection URL: postgresql://{args.host}:{args.port}/{args.dbname}")
    console.say("Done")

    try:
        run_main_menu(console)
    except (KeyboardInterrupt, EOFError):
        console.say("")
        logger.info("Session interrupted by user.")
    finally:
        console.say("Disconnecting from database...")
        close_connection()
        console.say("Done\n\nBye !")
    return 0


if __name__ == "__main__":
    sys.exit(main())
