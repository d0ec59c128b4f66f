"""
Person Entity

An immutable snapshot of a contact in the address book.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from addressbook.model.fields import Address, Email, Name, Phone, Tag
from addressbook.model.module_role_map import ModuleRoleMap


@dataclass(frozen=True)
class Person:
    """A person in the address book. Equal to another person when every field is equal."""
    name: Name
    phone: Phone
    email: Email
    address: Optional[Address]
    tags: FrozenSet[Tag] = field(default_factory=frozenset)
    module_role_map: ModuleRoleMap = field(default_factory=ModuleRoleMap)

    def __post_init__(self):
        # Freeze whatever iterable of tags was supplied so callers can't mutate it later
        object.__setattr__(self, 'tags', frozenset(self.tags))

    def has_address(self) -> bool:
        return self.address is not None

    def is_same_person(self, other: Optional['Person']) -> bool:
        """
        Check whether two persons represent the same contact.

        This is a weaker notion of equality than ``==``: only the names are
        compared.
        """
        if other is self:
            return True
        return other is not None and other.name == self.name

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name.full_name,
            'phone': self.phone.value,
            'email': self.email.value,
            'address': self.address.value if self.address is not None else None,
            'tags': sorted(tag.tag_name for tag in self.tags),
            'modules': self.module_role_map.to_dict()
        }
