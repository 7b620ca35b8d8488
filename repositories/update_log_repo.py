"""
repositories/update_log_repo.py
--------------------------------
Read access to RoomUpdatesLog. Entries are written by RoomRepository
together with the room change they describe.
"""

from db.executor import QueryResult, execute_query

_RECENT_SQL = """
    SELECT * FROM (
        SELECT l.updateNumber AS "updateNumber",
               l.managerID AS "managerID",
               l.hotelID AS "hotelID",
               l.roomNumber AS "roomNumber",
               l.updatedOn AS "updatedOn"
        FROM RoomUpdatesLog l
        {join}
        WHERE {condition}
        ORDER BY l.updatedOn DESC, l.updateNumber DESC
        LIMIT %s
    ) recent
    ORDER BY "updatedOn" ASC, "updateNumber" ASC;
"""


class UpdateLogRepository:
    """Queries over the room update log; newest N rows, listed oldest first."""

    def recent_for_hotel(self, hotel_id: int, limit: int = 5) -> QueryResult:
        sql = _RECENT_SQL.format(join="", condition="l.hotelID = %s")
        return execute_query(sql, (hotel_id, limit))

    def recent_for_manager(self, manager_id: int, limit: int = 5) -> QueryResult:
        """Recent updates across every hotel the manager runs."""
        sql = _RECENT_SQL.format(
            join="JOIN Hotel h ON h.hotelID = l.hotelID",
            condition="h.managerUserID = %s",
        )
        return execute_query(sql, (manager_id, limit))
