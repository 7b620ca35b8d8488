"""
models/maintenance.py
---------------------
Domain models for maintenance companies and repair requests.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class MaintenanceCompany:
    id: int
    name: str
    address: Optional[str] = None
    is_certified: bool = False


@dataclass
class RepairRequest:
    """
    A repair request placed by a manager.

    Attributes:
        manager_id: userID of the requesting manager.
        company_id: Maintenance company doing the repair.
        hotel_id: Hotel of the room.
        room_number: Room to repair.
        repair_date: Date the repair is scheduled for.
        repair_id: RoomRepairs primary key (set once saved).
        request_number: RoomRepairRequests primary key (set once saved).
    """
    manager_id: int
    company_id: int
    hotel_id: int
    room_number: int
    repair_date: date
    repair_id: Optional[int] = None
    request_number: Optional[int] = None
