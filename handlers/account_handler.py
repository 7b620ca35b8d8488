"""
handlers/account_handler.py
----------------------------
Main menu options: create a user and log in.
"""

from typing import Optional

from handlers.common import reports_errors
from models.user import User
from security import auth
from utils.console import Console
from utils.logger import get_logger

logger = get_logger(__name__)


@reports_errors
def create_user(console: Console) -> None:
    """Register a new customer and show the generated userID."""
    name = console.prompt("Enter name")
    password = console.prompt("Enter password")
    user_id = auth.create_user(name, password)
    console.say(f"User successfully created with userID = {user_id}")


@reports_errors
def log_in(console: Console) -> Optional[User]:
    """
    Ask for userID and password.

    Returns:
        The logged-in User, or None if the credentials were rejected.
    """
    user_id = console.prompt("Enter userID")
    password = console.prompt("Enter password")
    user = auth.log_in(user_id, password)
    if user is None:
        console.say("\tInvalid userID or password.")
        return None
    console.say(f"\tWelcome, {user.name}!")
    return user
