"""
services/manager_service.py
----------------------------
Reports available to hotel managers: room update log, booking history
and regular customers.
"""

from datetime import date
from typing import Optional

from config import RECENT_LIMIT
from db.executor import QueryResult
from repositories.booking_repo import BookingRepository
from repositories.update_log_repo import UpdateLogRepository
from security.auth import ensure_manages_hotel
from utils.errors import InvalidInputError


def check_date_range(start: Optional[date], end: Optional[date]) -> None:
    if start is not None and end is not None and start > end:
        raise InvalidInputError("The starting date must not be after the ending date.")


class ManagerService:
    """Read-only reports scoped to the hotels a manager runs."""

    def __init__(self):
        self.booking_repo = BookingRepository()
        self.log_repo = UpdateLogRepository()

    def recent_updates(
        self, manager_id: int, hotel_id: Optional[int] = None, limit: int = RECENT_LIMIT
    ) -> QueryResult:
        """
        The newest room updates, oldest of them first.

        Args:
            manager_id: Logged-in manager.
            hotel_id: Restrict to one of the manager's hotels; None means all of them.
            limit: Number of updates to show.
        """
        if hotel_id is None:
            return self.log_repo.recent_for_manager(manager_id, limit)
        ensure_manages_hotel(manager_id, hotel_id)
        return self.log_repo.recent_for_hotel(hotel_id, limit)

    def booking_history(
        self,
        manager_id: int,
        hotel_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> QueryResult:
        check_date_range(start, end)
        ensure_manages_hotel(manager_id, hotel_id)
        return self.booking_repo.history_for_hotel(hotel_id, start, end)

    def regular_customers(self, manager_id: int, hotel_id: int, limit: int = RECENT_LIMIT) -> QueryResult:
        ensure_manages_hotel(manager_id, hotel_id)
        return self.booking_repo.top_customers(hotel_id, limit)
