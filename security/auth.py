"""
security/auth.py
-----------------
Authentication and access control for the console.
Users log in with their numeric userID and password; manager menu
options are guarded by ``manager_only``.
"""

from functools import wraps
from typing import Callable, Optional

import psycopg2

from models.user import CUSTOMER, MANAGER, User, normalize_user_type
from repositories.hotel_repo import HotelRepository
from repositories.user_repo import UserRepository
from utils.errors import InvalidInputError, NotFoundError, PermissionDeniedError
from utils.logger import get_logger
from utils.validators import parse_int, require_text

logger = get_logger(__name__)
user_repo = UserRepository()
hotel_repo = HotelRepository()

MANAGER_ONLY_MESSAGE = "\tWhoops! We're sorry, this option is only available for managers."


def create_user(name: str, password: str) -> int:
    """
    Register a new customer account.
    The password is stored exactly as typed; only a blank one is refused.

    Returns:
        The generated userID.

    Raises:
        InvalidInputError: If the name or password is blank or too long.
    """
    name = require_text(name, "Name", max_len=50)
    require_text(password, "Password")
    if len(password) > 30:
        raise InvalidInputError("Password must be at most 30 characters.")
    user = user_repo.create(name, password, CUSTOMER)
    return user.id


def log_in(user_id_text: str, password: str) -> Optional[User]:
    """
    Check log in credentials for an existing user.

    Returns:
        The logged-in User, or None when the id is not a number or the
        id/password pair is unknown.
    """
    try:
        user_id = parse_int(user_id_text, "userID")
    except InvalidInputError:
        return None
    user = user_repo.check_credentials(user_id, password or "")
    if user is None:
        logger.warning(f"Failed log in attempt for userID {user_id}")
        return None
    logger.info(f"User {user.id} logged in as {normalize_user_type(user.user_type)}")
    return user


def is_manager(user_id: int) -> bool:
    """Look the user type up again; a failing lookup counts as "not a manager"."""
    try:
        user_type = user_repo.get_user_type(user_id)
    except psycopg2.Error as e:
        logger.error(f"Could not read user type of {user_id}: {e}")
        return False
    return MANAGER in normalize_user_type(user_type)


def ensure_manages_hotel(manager_id: int, hotel_id: int) -> None:
    """
    Raises:
        NotFoundError: If the hotel does not exist.
        PermissionDeniedError: If the hotel is run by someone else.
    """
    if hotel_repo.get_by_id(hotel_id) is None:
        raise NotFoundError(f"We're sorry. Hotel {hotel_id} does not exist in our database.")
    if not hotel_repo.is_managed_by(hotel_id, manager_id):
        raise PermissionDeniedError(f"We're sorry. You are not the manager of hotel {hotel_id}.")


def manager_only(func: Callable):
    """
    Decorator that restricts a menu handler to managers.

    Usage:
        @manager_only
        def my_handler(console, user):
            ...
    """
    @wraps(func)
    def wrapper(console, user: User, *args, **kwargs):
        if not is_manager(user.id):
            logger.warning(f"User {user.id} tried manager option {func.__name__}")
            console.say(MANAGER_ONLY_MESSAGE)
            return None
        return func(console, user, *args, **kwargs)

    return wrapper
