"""
repositories/hotel_repo.py
---------------------------
Data access layer for hotels.
"""

from typing import Optional

from db.executor import QueryResult, count_rows, execute_query
from models.hotel import Hotel

_HOTEL_COLUMNS = "hotelID, hotelName, latitude, longitude, managerUserID, dateEstablished"


class HotelRepository:
    """Read access to the Hotel table."""

    def get_by_id(self, hotel_id: int) -> Optional[Hotel]:
        sql = f"SELECT {_HOTEL_COLUMNS} FROM Hotel WHERE hotelID = %s;"
        result = execute_query(sql, (hotel_id,))
        return self._row_to_hotel(result.rows[0]) if result.rows else None

    def find_within(self, latitude: float, longitude: float, radius: float) -> QueryResult:
        """
        Hotels closer than ``radius`` units to a point, nearest first.

        Distances come from the calculate_distance() SQL function.
        """
        sql = """
            SELECT hotelID AS "hotelID",
                   hotelName AS "hotelName",
                   ROUND(calculate_distance(latitude, longitude, %s, %s)::numeric, 2) AS "unitsAway"
            FROM Hotel
            WHERE calculate_distance(latitude, longitude, %s, %s) < %s
            ORDER BY "unitsAway", hotelID;
        """
        return execute_query(sql, (latitude, longitude, latitude, longitude, radius))

    def is_managed_by(self, hotel_id: int, manager_id: int) -> bool:
        sql = "SELECT 1 FROM Hotel WHERE hotelID = %s AND managerUserID = %s;"
        return count_rows(sql, (hotel_id, manager_id)) > 0

    @staticmethod
    def _row_to_hotel(row: tuple) -> Hotel:
        return Hotel(
            id=row[0],
            name=(row[1] or "").strip(),
            latitude=float(row[2]),
            longitude=float(row[3]),
            manager_id=row[4],
            date_established=row[5],
        )
