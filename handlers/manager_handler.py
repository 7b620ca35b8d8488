"""
handlers/manager_handler.py
----------------------------
Menu options reserved for hotel managers.
Every handler is guarded by ``manager_only`` and checks that the manager
runs the hotel they ask about.
"""

from typing import Optional

from handlers.common import reports_errors
from models.user import User
from security.auth import manager_only
from services.export_service import ExportService
from services.maintenance_service import MaintenanceService
from services.manager_service import ManagerService
from services.room_service import RoomService
from utils.console import Console
from utils.validators import (
    DATE_FORMAT_HINT,
    parse_int,
    parse_optional_date,
    parse_price,
)

room_service = RoomService()
manager_service = ManagerService()
maintenance_service = MaintenanceService()
export_service = ExportService()

_UPDATE_ROOM_MENU = [(1, "Update Room Price"), (2, "Update Room imageURL")]


def _read_optional_hotel(console: Console) -> Optional[int]:
    raw = console.prompt("Enter Hotel ID (leave blank for all your hotels)")
    if not raw.strip():
        return None
    return parse_int(raw, "Hotel ID")


def _read_date_range(console: Console):
    start = parse_optional_date(
        console.prompt(f"Enter Starting Booking Date ({DATE_FORMAT_HINT}, blank for none)")
    )
    end = parse_optional_date(
        console.prompt(f"Enter Ending Booking Date ({DATE_FORMAT_HINT}, blank for none)")
    )
    return start, end


@reports_errors
@manager_only
def update_room_info(console: Console, user: User) -> None:
    """Sub-menu to change a room's price or image URL."""
    hotel_id = parse_int(console.prompt("Enter Hotel ID"), "Hotel ID")
    room_number = parse_int(console.prompt("Enter Room Number"), "Room number")
    room = room_service.ensure_editable(user.id, hotel_id, room_number)
    console.say(f"\tRoom {room.room_number}: price {room.price}, imageURL {room.image_url or '-'}")

    while True:
        console.show_menu("UPDATE ROOM", _UPDATE_ROOM_MENU, footer=(3, "Back"))
        choice = console.read_choice()
        if choice == 1:
            _update_price(console, user, hotel_id, room_number)
        elif choice == 2:
            _update_image_url(console, user, hotel_id, room_number)
        elif choice == 3:
            return
        else:
            console.say("Invalid Input, please try again")


@reports_errors
def _update_price(console: Console, user: User, hotel_id: int, room_number: int) -> None:
    price = parse_price(console.prompt("Enter New Room Price"))
    room_service.update_price(user.id, hotel_id, room_number, price)
    console.say("\tRoom Price has been updated!")


@reports_errors
def _update_image_url(console: Console, user: User, hotel_id: int, room_number: int) -> None:
    url = console.prompt("Enter New Image URL")
    room_service.update_image_url(user.id, hotel_id, room_number, url)
    console.say("\tRoom imageURL has been updated!")


@reports_errors
@manager_only
def view_recent_updates(console: Console, user: User) -> None:
    hotel_id = _read_optional_hotel(console)
    result = manager_service.recent_updates(user.id, hotel_id)
    console.print_table(result, empty_message="\tNo room updates recorded yet.")


@reports_errors
@manager_only
def view_booking_history(console: Console, user: User) -> None:
    hotel_id = parse_int(console.prompt("Enter Hotel ID"), "Hotel ID")
    start, end = _read_date_range(console)
    result = manager_service.booking_history(user.id, hotel_id, start, end)
    console.print_table(result, empty_message="\tNo bookings found for this hotel.")


@reports_errors
@manager_only
def view_regular_customers(console: Console, user: User) -> None:
    hotel_id = parse_int(console.prompt("Enter hotelID"), "Hotel ID")
    result = manager_service.regular_customers(user.id, hotel_id)
    console.say(f"\tThe top {len(result)} customers in this hotel are:")
    console.print_table(result, empty_message="\tNo customers have booked this hotel yet.")


@reports_errors
@manager_only
def place_repair_request(console: Console, user: User) -> None:
    hotel_id = parse_int(console.prompt("Enter Hotel ID"), "Hotel ID")
    room_number = parse_int(console.prompt("Enter Room Number"), "Room number")
    company_id = parse_int(console.prompt("Enter Company ID"), "Company ID")
    request = maintenance_service.place_request(user.id, hotel_id, room_number, company_id)
    console.say(
        f"\tRepair request #{request.request_number} placed for room {room_number} "
        f"on {request.repair_date.isoformat()}."
    )


@reports_errors
@manager_only
def view_repair_history(console: Console, user: User) -> None:
    result = maintenance_service.history(user.id)
    console.print_table(result, empty_message="\tYou have not placed any repair requests.")


@reports_errors
@manager_only
def export_booking_history(console: Console, user: User) -> None:
    """Write a hotel's booking history to CSV and show where it went."""
    hotel_id = parse_int(console.prompt("Enter Hotel ID"), "Hotel ID")
    start, end = _read_date_range(console)
    path, count = export_service.export_booking_history_csv(user.id, hotel_id, start, end)
    console.say(f"\tExported {count} bookings to {path}")
