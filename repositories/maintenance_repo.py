"""
repositories/maintenance_repo.py
---------------------------------
Data access layer for maintenance companies and room repair requests.
"""

from typing import Optional

from db.connection import get_connection
from db.executor import QueryResult, execute_query
from models.maintenance import MaintenanceCompany, RepairRequest
from utils.logger import get_logger

logger = get_logger(__name__)


class MaintenanceRepository:
    """Repository for MaintenanceCompany, RoomRepairs and RoomRepairRequests."""

    # ── CREATE ────────────────────────────────────────────

    def place_request(self, request: RepairRequest) -> RepairRequest:
        """
        Record a repair and the manager's request for it in one transaction.

        Returns:
            The same RepairRequest with `repair_id` and `request_number` populated.
        """
        repair_sql = """
            INSERT INTO RoomRepairs (companyID, hotelID, roomNumber, repairDate)
            VALUES (%s, %s, %s, %s)
            RETURNING repairID;
        """
        request_sql = """
            INSERT INTO RoomRepairRequests (managerID, repairID)
            VALUES (%s, %s)
            RETURNING requestNumber;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(repair_sql, (
                    request.company_id, request.hotel_id,
                    request.room_number, request.repair_date,
                ))
                request.repair_id = cur.fetchone()[0]
                cur.execute(request_sql, (request.manager_id, request.repair_id))
                request.request_number = cur.fetchone()[0]
            conn.commit()
            logger.info(
                f"Manager {request.manager_id} placed repair request #{request.request_number} "
                f"for room {request.hotel_id}/{request.room_number}"
            )
            return request
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to place repair request: {e}")
            raise

    # ── READ ──────────────────────────────────────────────

    def get_company(self, company_id: int) -> Optional[MaintenanceCompany]:
        sql = "SELECT companyID, name, address, isCertified FROM MaintenanceCompany WHERE companyID = %s;"
        result = execute_query(sql, (company_id,))
        if not result.rows:
            return None
        row = result.rows[0]
        return MaintenanceCompany(id=row[0], name=(row[1] or "").strip(), address=row[2], is_certified=bool(row[3]))

    def company_exists(self, company_id: int) -> bool:
        return self.get_company(company_id) is not None

    def history_for_manager(self, manager_id: int) -> QueryResult:
        """Every repair request the manager placed, most recent repair first."""
        sql = """
            SELECT q.requestNumber AS "requestNumber",
                   r.companyID AS "companyID",
                   r.hotelID AS "hotelID",
                   r.roomNumber AS "roomNumber",
                   r.repairDate AS "repairDate"
            FROM RoomRepairRequests q
            JOIN RoomRepairs r ON r.repairID = q.repairID
            WHERE q.managerID = %s
            ORDER BY r.repairDate DESC, q.requestNumber DESC;
        """
        return execute_query(sql, (manager_id,))
