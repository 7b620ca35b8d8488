"""
services/export_service.py
---------------------------
Writes a hotel's booking history to a CSV file.
"""

from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd

from config import EXPORT_DIR
from services.manager_service import ManagerService
from utils.logger import get_logger

logger = get_logger(__name__)


class ExportService:
    """Generates CSV reports for managers."""

    def __init__(self, export_dir: str = EXPORT_DIR):
        self.manager_service = ManagerService()
        self.export_dir = Path(export_dir)

    def export_booking_history_csv(
        self,
        manager_id: int,
        hotel_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> tuple[Path, int]:
        """
        Export a hotel's bookings as a CSV file.

        Args:
            manager_id: Logged-in manager (must run the hotel).
            hotel_id: Hotel to export.
            start: Earliest booking date, inclusive.
            end: Latest booking date, inclusive.

        Returns:
            The written file path and the number of bookings in it.
        """
        result = self.manager_service.booking_history(manager_id, hotel_id, start, end)
        df = pd.DataFrame(result.rows, columns=result.columns)

        bounds = [f"from_{start.isoformat()}"] if start is not None else []
        if end is not None:
            bounds.append(f"to_{end.isoformat()}")
        filename = "_".join([f"bookings_hotel_{hotel_id}", *bounds]) + ".csv"
        self.export_dir.mkdir(parents=True, exist_ok=True)
        path = self.export_dir / filename
        df.to_csv(path, index=False, encoding="utf-8")

        logger.info(f"Exported {len(df)} bookings of hotel {hotel_id} to {path}")
        return path, len(df)
