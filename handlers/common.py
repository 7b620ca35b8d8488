"""
handlers/common.py
-------------------
Error reporting shared by every menu handler.
"""

from functools import wraps
from typing import Callable

import psycopg2

from utils.console import Console
from utils.errors import HotelAppError
from utils.logger import get_logger

logger = get_logger(__name__)

DB_ERROR_MESSAGE = "\tSomething went wrong while talking to the database. Please try again."
FILE_ERROR_MESSAGE = "\tCould not write the file: {}"


def reports_errors(func: Callable):
    """
    Decorator that turns failures of a menu operation into a printed message.

    Behavior:
        - HotelAppError (bad input, unknown rows, no permission, conflicts)
          prints its own message.
        - psycopg2.Error is logged and reported generically.
        - OSError (an export that cannot be written) is logged and reported
          with the system reason.
        - The operation is aborted either way and the menu carries on.
    """
    @wraps(func)
    def wrapper(console: Console, *args, **kwargs):
        try:
            return func(console, *args, **kwargs)
        except HotelAppError as e:
            console.say(f"\t{e}")
        except psycopg2.Error as e:
            logger.error(f"{func.__name__} failed: {e}")
            console.say(DB_ERROR_MESSAGE)
        except OSError as e:
            logger.error(f"{func.__name__} failed: {e}")
            console.say(FILE_ERROR_MESSAGE.format(e.strerror or e))
        return None

    return wrapper
