"""
handlers/customer_handler.py
-----------------------------
Menu options available to every logged-in user: hotel search, room
availability, booking, and the user's own booking history.
"""

from handlers.common import reports_errors
from models.user import User
from services.booking_service import BookingService
from services.hotel_service import HotelService
from services.room_service import RoomService
from utils.console import Console
from utils.validators import DATE_FORMAT_HINT, parse_date, parse_float, parse_int

hotel_service = HotelService()
room_service = RoomService()
booking_service = BookingService()


@reports_errors
def view_hotels(console: Console, user: User) -> None:
    """List hotels within the search radius of a point."""
    latitude = parse_float(console.prompt("Enter latitude"), "Latitude")
    longitude = parse_float(console.prompt("Enter longitude"), "Longitude")
    result = hotel_service.hotels_near(latitude, longitude)
    console.print_table(result, empty_message=f"\tNo hotels within {hotel_service.radius:g} units.")


@reports_errors
def view_rooms(console: Console, user: User) -> None:
    """List a hotel's rooms with price and availability on a date."""
    hotel_id = parse_int(console.prompt("Enter hotelID"), "Hotel ID")
    on_date = parse_date(console.prompt(f"Enter date of stay ({DATE_FORMAT_HINT})"))
    result = room_service.rooms_for(hotel_id, on_date)
    console.print_table(result, empty_message=f"\tHotel {hotel_id} has no rooms listed.")


@reports_errors
def book_room(console: Console, user: User) -> None:
    hotel_id = parse_int(console.prompt("Enter Hotel ID"), "Hotel ID")
    room_number = parse_int(console.prompt("Enter Room Number"), "Room number")
    # Fail early, before asking for the date.
    booking_service.ensure_room_exists(hotel_id, room_number)
    on_date = parse_date(console.prompt(f"Enter the date of your stay ({DATE_FORMAT_HINT})"))
    booking = booking_service.book(user.id, hotel_id, room_number, on_date)
    console.say(f"\tBooking successful! Your total is: {booking.price}")


@reports_errors
def view_recent_bookings(console: Console, user: User) -> None:
    result = booking_service.recent_bookings(user.id)
    console.print_table(result, empty_message="\tYou have no bookings yet.")
