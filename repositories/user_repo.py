"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.executor import execute_query, execute_returning, fetch_scalar
from models.user import CUSTOMER, User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for CRUD operations on the Users table."""

    def create(self, name: str, password: str, user_type: str = CUSTOMER) -> User:
        """
        Insert a new user.

        Returns:
            The saved User with its generated userID.
        """
        sql = """
            INSERT INTO Users (name, password, userType)
            VALUES (%s, %s, %s)
            RETURNING userID;
        """
        row = execute_returning(sql, (name, password, user_type))
        user = User(name=name, user_type=user_type, id=row[0])
        logger.info(f"Created {user_type} user #{user.id}")
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        sql = "SELECT userID, name, userType FROM Users WHERE userID = %s;"
        result = execute_query(sql, (user_id,))
        return self._row_to_user(result.rows[0]) if result.rows else None

    def check_credentials(self, user_id: int, password: str) -> Optional[User]:
        """
        Look a user up by id and password.

        Returns:
            The matching User, or None if the pair is unknown.
        """
        sql = "SELECT userID, name, userType FROM Users WHERE userID = %s AND password = %s;"
        result = execute_query(sql, (user_id, password))
        return self._row_to_user(result.rows[0]) if result.rows else None

    def get_user_type(self, user_id: int) -> Optional[str]:
        return fetch_scalar("SELECT userType FROM Users WHERE userID = %s;", (user_id,))

    @staticmethod
    def _row_to_user(row: tuple) -> User:
        """Convert a (userID, name, userType) row to a User."""
        return User(id=row[0], name=(row[1] or "").strip(), user_type=(row[2] or "").strip())
