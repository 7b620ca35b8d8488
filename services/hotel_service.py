"""
services/hotel_service.py
--------------------------
Hotel search.
"""

from config import HOTEL_SEARCH_RADIUS
from db.executor import QueryResult
from repositories.hotel_repo import HotelRepository


class HotelService:
    def __init__(self, radius: float = HOTEL_SEARCH_RADIUS):
        self.repo = HotelRepository()
        self.radius = radius

    def hotels_near(self, latitude: float, longitude: float) -> QueryResult:
        """
        Hotels strictly closer than the search radius to the given point.

        Coordinates are plain units, as in calculate_distance(); any finite
        pair is a valid search point.
        """
        return self.repo.find_within(latitude, longitude, self.radius)
