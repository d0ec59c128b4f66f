"""
Model package for the address book

Contains the person entity, its value objects and the address book itself.
"""

from .fields import Name, Phone, Email, Address, Tag
from .module_role_map import ModuleCode, ModuleRoleMap
from .person import Person
from .address_book import AddressBook

__all__ = [
    'Name',
    'Phone',
    'Email',
    'Address',
    'Tag',
    'ModuleCode',
    'ModuleRoleMap',
    'Person',
    'AddressBook'
]
