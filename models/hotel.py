"""
models/hotel.py
---------------
Domain models for hotels and their rooms.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Hotel:
    """
    Represents a hotel.

    Attributes:
        id: hotelID.
        name: hotelName.
        latitude: Latitude in coordinate units.
        longitude: Longitude in coordinate units.
        manager_id: userID of the manager running the hotel.
        date_established: Opening date, if known.
    """
    id: int
    name: str
    latitude: float
    longitude: float
    manager_id: int
    date_established: Optional[date] = None


@dataclass
class Room:
    """A room within a hotel, identified by its room number."""
    hotel_id: int
    room_number: int
    price: int
    image_url: Optional[str] = None

    def __str__(self) -> str:
        return f"Hotel {self.hotel_id} / room {self.room_number}: {self.price}"
