"""User roles for role-based authorization.

Role Hierarchy:
    admin > gestor > colaborador

    - colaborador: Employee submitting emociograma check-ins
    - gestor: Manager receiving emotional alerts for the organization
    - admin: Organization administrator (user management, all gestor rights)

Usage:
    from src.domain.enums import UserRole

    if user.role in UserRole.managers():
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles for role-based authorization.

    String Enum:
        Values are lowercase strings stored in the database and embedded
        in access token ``roles`` claims.
    """

    COLABORADOR = "colaborador"
    """Employee role. Submits check-ins and manages own data."""

    GESTOR = "gestor"
    """Manager role. Receives alerts, resolves them, lists users."""

    ADMIN = "admin"
    """Administrator role. Everything a gestor can do plus user deletion."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['colaborador', 'gestor', 'admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()

    @classmethod
    def managers(cls) -> list["UserRole"]:
        """Roles notified about emotional alerts.

        Returns:
            list[UserRole]: [GESTOR, ADMIN].
        """
        return [cls.GESTOR, cls.ADMIN]
