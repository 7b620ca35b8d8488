"""
models/booking.py
-----------------
Domain model for room bookings.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Booking:
    """
    Represents a single room booking.

    Attributes:
        customer_id: userID of the customer.
        hotel_id: Hotel the room belongs to.
        room_number: Booked room.
        booking_date: Night of the stay.
        id: bookingID (None for new bookings).
        price: Room price, filled in once the booking is saved.
    """
    customer_id: int
    hotel_id: int
    room_number: int
    booking_date: date
    id: Optional[int] = None
    price: Optional[int] = None

    def __str__(self) -> str:
        return (
            f"Booking #{self.id}: hotel {self.hotel_id}, room {self.room_number}, "
            f"{self.booking_date.isoformat()}"
        )
