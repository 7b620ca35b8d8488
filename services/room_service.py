"""
services/room_service.py
-------------------------
Room availability and manager updates to room information.
"""

from datetime import date

from db.executor import QueryResult
from models.hotel import Room
from repositories.hotel_repo import HotelRepository
from repositories.room_repo import RoomRepository
from security.auth import ensure_manages_hotel
from utils.errors import InvalidInputError, NotFoundError
from utils.validators import require_text


class RoomService:
    """
    Responsibilities:
        - List the rooms of a hotel with availability on a date.
        - Let the hotel's manager change a room's price or image URL.
    """

    def __init__(self):
        self.repo = RoomRepository()
        self.hotel_repo = HotelRepository()

    def rooms_for(self, hotel_id: int, on_date: date) -> QueryResult:
        if self.hotel_repo.get_by_id(hotel_id) is None:
            raise NotFoundError(f"We're sorry. Hotel {hotel_id} does not exist in our database.")
        return self.repo.list_with_availability(hotel_id, on_date)

    def ensure_editable(self, manager_id: int, hotel_id: int, room_number: int) -> Room:
        """Check the manager runs the hotel and the room exists before any change."""
        ensure_manages_hotel(manager_id, hotel_id)
        room = self.repo.get(hotel_id, room_number)
        if room is None:
            raise NotFoundError("We're sorry. This room and hotel do not exist in our database.")
        return room

    def update_price(self, manager_id: int, hotel_id: int, room_number: int, price: int) -> None:
        if price < 0:
            raise InvalidInputError("Price cannot be negative.")
        self.ensure_editable(manager_id, hotel_id, room_number)
        if not self.repo.update_price(hotel_id, room_number, price, manager_id):
            raise NotFoundError("We're sorry. This room and hotel do not exist in our database.")

    def update_image_url(self, manager_id: int, hotel_id: int, room_number: int, url: str) -> None:
        url = require_text(url, "Image URL", max_len=2048)
        self.ensure_editable(manager_id, hotel_id, room_number)
        if not self.repo.update_image_url(hotel_id, room_number, url, manager_id):
            raise NotFoundError("We're sorry. This room and hotel do not exist in our database.")
