"""
services/booking_service.py
----------------------------
Business logic for booking rooms and reading a customer's bookings.
"""

from datetime import date

from psycopg2 import errors

from config import RECENT_LIMIT
from db.executor import QueryResult
from models.booking import Booking
from repositories.booking_repo import BookingRepository
from repositories.room_repo import RoomRepository
from utils.errors import ConflictError, NotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)

ROOM_MISSING_MESSAGE = "We're sorry. This room and hotel do not exist in our database."
UNAVAILABLE_MESSAGE = (
    "We're sorry. The room you requested is not available. "
    "Please try a different date or room."
)


class BookingService:
    """
    Workflow for a booking:
        1. The room must be free on the requested date.
        2. Persist the booking; the Rooms foreign key rejects unknown rooms.
        3. Report the price.
    """

    def __init__(self):
        self.repo = BookingRepository()
        self.room_repo = RoomRepository()

    def ensure_room_exists(self, hotel_id: int, room_number: int) -> None:
        if not self.room_repo.exists(hotel_id, room_number):
            raise NotFoundError(ROOM_MISSING_MESSAGE)

    def book(self, customer_id: int, hotel_id: int, room_number: int, on_date: date) -> Booking:
        """
        Book a room for one night.

        Raises:
            NotFoundError: The room does not exist.
            ConflictError: The room is already booked on that date.
        """
        if self.repo.is_booked(hotel_id, room_number, on_date):
            raise ConflictError(UNAVAILABLE_MESSAGE)

        booking = Booking(
            customer_id=customer_id,
            hotel_id=hotel_id,
            room_number=room_number,
            booking_date=on_date,
        )
        try:
            saved = self.repo.add(booking)
        except errors.UniqueViolation:
            # Someone else booked the room between the check and the insert.
            raise ConflictError(UNAVAILABLE_MESSAGE) from None
        except errors.ForeignKeyViolation:
            raise NotFoundError(ROOM_MISSING_MESSAGE) from None
        saved.price = self.room_repo.get_price(hotel_id, room_number)
        return saved

    def recent_bookings(self, customer_id: int, limit: int = RECENT_LIMIT) -> QueryResult:
        return self.repo.recent_for_customer(customer_id, limit)
