"""
Module Role Mapping

Associates the modules a person takes part in with the role they hold in
each one. A module code maps to exactly one role within a map.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from addressbook.core.errors import ErrorCode, ValidationError
from addressbook.core.role_type import RoleType


@dataclass(frozen=True)
class ModuleCode:
    """A module identifier such as CS1101S or GEA1000."""
    value: str

    MESSAGE_CONSTRAINTS = (
        "Module codes should start with 2 to 4 upper-case letters, followed by 4 digits "
        "and an optional suffix of up to 2 upper-case letters"
    )
    VALIDATION_PATTERN = re.compile(r'^[A-Z]{2,4}\d{4}[A-Z]{0,2}$')

    def __post_init__(self):
        if not self.is_valid_module_code(self.value):
            raise ValidationError(ErrorCode.INVALID_MODULE_CODE, self.MESSAGE_CONSTRAINTS, {"value": self.value})

    @classmethod
    def is_valid_module_code(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return self.value


class ModuleRoleMap:
    """Immutable mapping of ModuleCode to RoleType."""

    def __init__(self, roles: Optional[Dict[ModuleCode, RoleType]] = None):
        """
        Initialize the map from an existing mapping.

        Args:
            roles: Mapping of module code to role; copied, never shared

        Raises:
            ValidationError: If a key is not a ModuleCode or a value not a RoleType
        """
        roles = roles or {}
        for module_code, role_type in roles.items():
            self._check_entry(module_code, role_type)
        self._roles: Dict[ModuleCode, RoleType] = dict(roles)

    @classmethod
    def from_lists(cls, module_codes: Sequence[ModuleCode], role_types: Sequence[RoleType]) -> 'ModuleRoleMap':
        """
        Build a map by pairing two ordered sequences positionally.

        A module code repeated in the sequence keeps the role paired with its
        last occurrence.

        Raises:
            ValidationError: If either argument is a single value, or the sequences differ in length
        """
        if isinstance(module_codes, ModuleCode) or isinstance(role_types, RoleType):
            raise ValidationError(
                ErrorCode.INVALID_DATA,
                "Module codes and role types must both be sequences, or both single values",
                {"module_codes": type(module_codes).__name__, "role_types": type(role_types).__name__}
            )

        module_codes = list(module_codes)
        role_types = list(role_types)
        if len(module_codes) != len(role_types):
            raise ValidationError(
                ErrorCode.MODULE_ROLE_LENGTH_MISMATCH,
                "Each module code must be paired with exactly one role type",
                {"module_codes": len(module_codes), "role_types": len(role_types)}
            )

        return cls(dict(zip(module_codes, role_types)))

    @staticmethod
    def _check_entry(module_code, role_type) -> None:
        if not isinstance(module_code, ModuleCode):
            raise ValidationError(
                ErrorCode.INVALID_DATA,
                f"Expected a ModuleCode key, got {type(module_code).__name__}"
            )
        if not isinstance(role_type, RoleType):
            raise ValidationError(
                ErrorCode.INVALID_DATA,
                f"Expected a RoleType value, got {type(role_type).__name__}"
            )

    def get_role(self, module_code: ModuleCode) -> Optional[RoleType]:
        """Get the role held in a module, or None if not part of it."""
        return self._roles.get(module_code)

    def has_module(self, module_code: ModuleCode) -> bool:
        return module_code in self._roles

    def module_codes(self) -> List[ModuleCode]:
        return list(self._roles)

    def modules_with_role(self, role_type: RoleType) -> List[ModuleCode]:
        """Get all module codes in which the given role is held."""
        return [code for code, role in self._roles.items() if role == role_type]

    def to_dict(self) -> Dict[str, str]:
        """Convert to a plain dictionary of strings for serialization."""
        return {code.value: role.value for code, role in self._roles.items()}

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, module_code) -> bool:
        return module_code in self._roles

    def __iter__(self) -> Iterator[ModuleCode]:
        return iter(self._roles)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ModuleRoleMap):
            return NotImplemented
        return self._roles == other._roles

    def __hash__(self) -> int:
        return hash(frozenset(self._roles.items()))

    def __repr__(self) -> str:
        entries = ', '.join(f"{code.value}: {role.name}" for code, role in self._roles.items())
        return f"ModuleRoleMap({{{entries}}})"
