"""
repositories/booking_repo.py
-----------------------------
Data access layer for room bookings.
All SQL queries related to the `RoomBookings` table live here.
"""

from datetime import date
from typing import Optional

from db.executor import QueryResult, count_rows, execute_query, execute_returning
from models.booking import Booking
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingRepository:
    """Repository for CRUD operations on the RoomBookings table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, booking: Booking) -> Booking:
        """
        Insert a new booking.

        Returns:
            The same Booking with its `id` populated.
        """
        sql = """
            INSERT INTO RoomBookings (customerID, hotelID, roomNumber, bookingDate)
            VALUES (%s, %s, %s, %s)
            RETURNING bookingID;
        """
        row = execute_returning(sql, (
            booking.customer_id, booking.hotel_id, booking.room_number, booking.booking_date,
        ))
        booking.id = row[0]
        logger.info(f"Added booking #{booking.id} for customer {booking.customer_id}")
        return booking

    # ── READ ──────────────────────────────────────────────

    def is_booked(self, hotel_id: int, room_number: int, on_date: date) -> bool:
        sql = """
            SELECT 1 FROM RoomBookings
            WHERE hotelID = %s AND roomNumber = %s AND bookingDate = %s;
        """
        return count_rows(sql, (hotel_id, room_number, on_date)) > 0

    def recent_for_customer(self, customer_id: int, limit: int = 5) -> QueryResult:
        """Latest bookings of a customer with the price paid, newest first."""
        sql = """
            SELECT b.hotelID AS "hotelID",
                   b.roomNumber AS "roomNumber",
                   b.bookingDate AS "bookingDate",
                   r.price AS "price"
            FROM RoomBookings b
            JOIN Rooms r ON r.hotelID = b.hotelID AND r.roomNumber = b.roomNumber
            WHERE b.customerID = %s
            ORDER BY b.bookingDate DESC, b.bookingID DESC
            LIMIT %s;
        """
        return execute_query(sql, (customer_id, limit))

    def history_for_hotel(
        self, hotel_id: int, start: Optional[date] = None, end: Optional[date] = None
    ) -> QueryResult:
        """
        All bookings of a hotel, optionally bounded by dates (both inclusive).
        """
        sql = """
            SELECT b.bookingID AS "bookingID",
                   u.name AS "customerName",
                   b.hotelID AS "hotelID",
                   b.roomNumber AS "roomNumber",
                   b.bookingDate AS "bookingDate"
            FROM RoomBookings b
            JOIN Users u ON u.userID = b.customerID
            WHERE b.hotelID = %s
        """
        params: list = [hotel_id]
        if start is not None:
            sql += " AND b.bookingDate >= %s"
            params.append(start)
        if end is not None:
            sql += " AND b.bookingDate <= %s"
            params.append(end)
        sql += " ORDER BY b.bookingDate DESC, b.bookingID DESC;"
        return execute_query(sql, params)

    def top_customers(self, hotel_id: int, limit: int = 5) -> QueryResult:
        """Customers with the most bookings at a hotel."""
        sql = """
            SELECT u.userID AS "userID",
                   u.name AS "name",
                   COUNT(b.bookingID) AS "numberOfBookings"
            FROM RoomBookings b
            JOIN Users u ON u.userID = b.customerID
            WHERE b.hotelID = %s
            GROUP BY u.userID, u.name
            ORDER BY "numberOfBookings" DESC, u.userID
            LIMIT %s;
        """
        return execute_query(sql, (hotel_id, limit))
