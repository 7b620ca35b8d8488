"""
handlers/menu.py
-----------------
Numeric menu dispatcher: the main (account) menu and the menu shown
after logging in.
"""

from typing import Callable, Optional

from config import HOTEL_SEARCH_RADIUS
from handlers import account_handler, customer_handler, manager_handler
from models.user import User
from utils.console import Console
from utils.logger import get_logger

logger = get_logger(__name__)

UNRECOGNIZED_MESSAGE = "Unrecognized choice!"

EXIT_CHOICE = 9
LOGOUT_CHOICE = 20

MAIN_MENU = [(1, "Create user"), (2, "Log in")]

# (choice, label, handler(console, user))
USER_MENU: list[tuple[int, str, Callable[[Console, User], None]]] = [
    (1, f"View Hotels within {HOTEL_SEARCH_RADIUS:g} units", customer_handler.view_hotels),
    (2, "View Rooms", customer_handler.view_rooms),
    (3, "Book a Room", customer_handler.book_room),
    (4, "View recent booking history", customer_handler.view_recent_bookings),
    # Manager options
    (5, "Update Room Information", manager_handler.update_room_info),
    (6, "View 5 recent Room Updates Info", manager_handler.view_recent_updates),
    (7, "View booking history of the hotel", manager_handler.view_booking_history),
    (8, "View 5 regular Customers", manager_handler.view_regular_customers),
    (9, "Place room repair Request to a company", manager_handler.place_repair_request),
    (10, "View room repair Requests history", manager_handler.view_repair_history),
    (11, "Export booking history of the hotel to CSV", manager_handler.export_booking_history),
]

_USER_HANDLERS = {choice: handler for choice, _, handler in USER_MENU}


def run_user_menu(console: Console, user: User) -> None:
    """Loop over the logged-in menu until the user logs out."""
    while True:
        console.show_menu(
            "MAIN MENU",
            [(choice, label) for choice, label, _ in USER_MENU],
            footer=(LOGOUT_CHOICE, "Log out"),
        )
        choice = console.read_choice()
        if choice == LOGOUT_CHOICE:
            logger.info(f"User {user.id} logged out")
            return
        handler = _USER_HANDLERS.get(choice)
        if handler is None:
            console.say(UNRECOGNIZED_MESSAGE)
            continue
        handler(console, user)


def run_main_menu(console: Console) -> None:
    """Loop over the account menu until the user chooses to exit."""
    while True:
        console.show_menu("MAIN MENU", MAIN_MENU, footer=(EXIT_CHOICE, "< EXIT"))
        choice = console.read_choice()
        user: Optional[User] = None
        if choice == 1:
            account_handler.create_user(console)
        elif choice == 2:
            user = account_handler.log_in(console)
        elif choice == EXIT_CHOICE:
            return
        else:
            console.say(UNRECOGNIZED_MESSAGE)

        if user is not None:
            run_user_menu(console, user)
