"""User account data models."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..storage.registry import InMemoryRegistry


class UserRole(Enum):
    """Ticket buyer categories."""

    STUDENT = "STUDENT"
    FACULTY = "FACULTY"
    FAMILY = "FAMILY"
    REGULAR = "REGULAR"

    @classmethod
    def from_string(cls, role_str: str | None) -> "UserRole":
        """Create UserRole from string, defaulting to REGULAR if unknown."""
        if not role_str:
            return cls.REGULAR
        for role in cls:
            if role.value.lower() == role_str.strip().lower():
                return role
        return cls.REGULAR

    def get_discount_percentage(self) -> int:
        """Get the ticket discount percentage for this role."""
        discounts = {
            UserRole.STUDENT: 10,
            UserRole.FACULTY: 10,
            UserRole.FAMILY: 15,
            UserRole.REGULAR: 0,
        }
        return discounts.get(self, 0)


@dataclass
class User:
    """A ticketing account.

    Fields may be set freely until the user is registered. The password is
    kept exactly as given.
    """

    username: str = ""
    email: str = ""
    password: str = ""
    role: UserRole = UserRole.REGULAR
    id: int | None = None

    def is_registered(self) -> bool:
        """Check if the registry has assigned an ID to this user."""
        return self.id is not None

    def register(self, registry: "InMemoryRegistry") -> int:
        """Register this user with the registry.

        Args:
            registry: Registry that stores the user

        Returns:
            The ID assigned to the user
        """
        return registry.add_user(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert user to a JSON-serializable dictionary without the password."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "discount_percentage": self.role.get_discount_percentage(),
        }

    def __str__(self) -> str:
        return f"{self.username} <{self.email}> [{self.role.value}]"
