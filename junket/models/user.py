"""
User role enumeration for access control.
"""

from enum import Enum
from typing import Optional, Union


class UserRole(str, Enum):
    """User roles for access control."""
    ADMIN = "admin"
    AGENT = "agent"
    STAFF = "staff"
    BOSS = "boss"
    UNKNOWN = "unknown"   # Anything we don't recognise

    @classmethod
    def parse(cls, value: Optional[Union[str, "UserRole"]]) -> "UserRole":
        """
        Map a raw role value to a known role.

        Matching is exact: "Admin" or " admin" are not admin.
        Never raises; unrecognised input becomes UNKNOWN.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not UserRole.UNKNOWN
