"""
repositories/room_repo.py
--------------------------
Data access layer for rooms.
Room changes and their RoomUpdatesLog entry are written in one transaction.
"""

from datetime import date
from typing import Optional

from db.connection import get_connection
from db.executor import QueryResult, count_rows, execute_query, fetch_scalar
from models.hotel import Room
from utils.logger import get_logger

logger = get_logger(__name__)

# Columns a manager is allowed to change.
_UPDATABLE_COLUMNS = {"price": "price", "image_url": "imageURL"}


class RoomRepository:
    """Repository for read and update operations on the Rooms table."""

    # ── READ ──────────────────────────────────────────────

    def get(self, hotel_id: int, room_number: int) -> Optional[Room]:
        sql = """
            SELECT hotelID, roomNumber, price, imageURL
            FROM Rooms WHERE hotelID = %s AND roomNumber = %s;
        """
        result = execute_query(sql, (hotel_id, room_number))
        return self._row_to_room(result.rows[0]) if result.rows else None

    def exists(self, hotel_id: int, room_number: int) -> bool:
        sql = "SELECT 1 FROM Rooms WHERE hotelID = %s AND roomNumber = %s;"
        return count_rows(sql, (hotel_id, room_number)) > 0

    def get_price(self, hotel_id: int, room_number: int) -> Optional[int]:
        sql = "SELECT price FROM Rooms WHERE hotelID = %s AND roomNumber = %s;"
        return fetch_scalar(sql, (hotel_id, room_number))

    def list_with_availability(self, hotel_id: int, on_date: date) -> QueryResult:
        """
        All rooms of a hotel with their price and whether they are free on ``on_date``.
        """
        sql = """
            SELECT r.roomNumber AS "roomNumber",
                   r.price AS "price",
                   CASE WHEN b.bookingID IS NULL THEN 'available' ELSE 'booked' END AS "availability"
            FROM Rooms r
            LEFT JOIN RoomBookings b
              ON b.hotelID = r.hotelID
             AND b.roomNumber = r.roomNumber
             AND b.bookingDate = %s
            WHERE r.hotelID = %s
            ORDER BY r.roomNumber;
        """
        return execute_query(sql, (on_date, hotel_id))

    # ── UPDATE ────────────────────────────────────────────

    def update_price(self, hotel_id: int, room_number: int, price: int, manager_id: int) -> bool:
        return self._update_and_log("price", price, hotel_id, room_number, manager_id)

    def update_image_url(self, hotel_id: int, room_number: int, url: str, manager_id: int) -> bool:
        return self._update_and_log("image_url", url, hotel_id, room_number, manager_id)

    def _update_and_log(self, field: str, value, hotel_id: int, room_number: int, manager_id: int) -> bool:
        """
        Change one room column and record the change in RoomUpdatesLog.

        Returns:
            True if the room existed and was updated.
        """
        column = _UPDATABLE_COLUMNS[field]
        update_sql = f"UPDATE Rooms SET {column} = %s WHERE hotelID = %s AND roomNumber = %s;"
        log_sql = """
            INSERT INTO RoomUpdatesLog (managerID, hotelID, roomNumber, updatedOn)
            VALUES (%s, %s, %s, NOW());
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(update_sql, (value, hotel_id, room_number))
                updated = cur.rowcount > 0
                if updated:
                    cur.execute(log_sql, (manager_id, hotel_id, room_number))
            conn.commit()
            if updated:
                logger.info(f"Manager {manager_id} updated {column} of room {hotel_id}/{room_number}")
            return updated
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to update {column} of room {hotel_id}/{room_number}: {e}")
            raise

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_room(row: tuple) -> Room:
        return Room(hotel_id=row[0], room_number=row[1], price=row[2], image_url=row[3])
