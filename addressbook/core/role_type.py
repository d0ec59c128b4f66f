"""
Role Type Enumeration

Defines the roles a person can hold within a module.
"""

from enum import Enum

from addressbook.core.errors import ErrorCode, ValidationError


class RoleType(Enum):
    """Role enumeration."""
    STUDENT = "student"
    TUTOR = "tutor"
    PROFESSOR = "professor"

    @classmethod
    def from_string(cls, value: str) -> 'RoleType':
        """Parse a role name such as 'Student' or 'TUTOR'."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            for role in cls:
                if role.value == normalized:
                    return role

        raise ValidationError(
            ErrorCode.INVALID_ROLE_TYPE,
            f"Role must be one of: {', '.join(role.value for role in cls)}",
            {"value": value}
        )
