"""
models/user.py
--------------
Domain model for application users.
"""

from dataclasses import dataclass
from typing import Optional


CUSTOMER = "customer"
MANAGER = "manager"
ADMIN = "admin"


def normalize_user_type(user_type: Optional[str]) -> str:
    """Lower-case a stored user type and strip CHAR(n) padding."""
    return (user_type or "").strip().lower()


@dataclass
class User:
    """
    Represents a row of the Users table.

    Attributes:
        id: userID (None for users not yet saved).
        name: Display name.
        user_type: 'customer', 'manager' or 'admin'.
    """
    name: str
    user_type: str = CUSTOMER
    id: Optional[int] = None

    def is_manager(self) -> bool:
        return MANAGER in normalize_user_type(self.user_type)

    def is_admin(self) -> bool:
        return normalize_user_type(self.user_type) == ADMIN

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({normalize_user_type(self.user_type)})"
