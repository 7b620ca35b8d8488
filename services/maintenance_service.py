"""
services/maintenance_service.py
--------------------------------
Business logic for room repair requests.
"""

from datetime import date
from typing import Optional

from db.executor import QueryResult
from models.maintenance import RepairRequest
from repositories.maintenance_repo import MaintenanceRepository
from repositories.room_repo import RoomRepository
from security.auth import ensure_manages_hotel
from utils.errors import NotFoundError


class MaintenanceService:
    def __init__(self):
        self.repo = MaintenanceRepository()
        self.room_repo = RoomRepository()

    def place_request(
        self,
        manager_id: int,
        hotel_id: int,
        room_number: int,
        company_id: int,
        repair_date: Optional[date] = None,
    ) -> RepairRequest:
        """
        Ask a maintenance company to repair a room of one of the manager's hotels.

        Raises:
            NotFoundError: Unknown hotel, room or company.
            PermissionDeniedError: The hotel is run by another manager.
        """
        ensure_manages_hotel(manager_id, hotel_id)
        if not self.room_repo.exists(hotel_id, room_number):
            raise NotFoundError("We're sorry. This room and hotel do not exist in our database.")
        if not self.repo.company_exists(company_id):
            raise NotFoundError("We're sorry. This Maintenance Company does not exist in our database.")

        request = RepairRequest(
            manager_id=manager_id,
            company_id=company_id,
            hotel_id=hotel_id,
            room_number=room_number,
            repair_date=repair_date or date.today(),
        )
        return self.repo.place_request(request)

    def history(self, manager_id: int) -> QueryResult:
        return self.repo.history_for_manager(manager_id)
