"""
Address Book

In-memory list of persons in which no two entries are the same person
(see Person.is_same_person).
"""

import logging
from typing import Iterable, List, Tuple

from addressbook.core.errors import ErrorCode, ValidationError
from addressbook.model.person import Person

logger = logging.getLogger(__name__)


class AddressBook:
    """Holds the persons of the address book, enforcing uniqueness by name."""

    def __init__(self, persons: Iterable[Person] = ()):
        self._persons: List[Person] = []
        self.set_persons(persons)

    def has_person(self, person: Person) -> bool:
        """Check whether an equivalent person is already in the address book."""
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        """
        Add a person to the address book.

        Raises:
            ValidationError: If the same person is already present
        """
        if self.has_person(person):
            raise ValidationError(
                ErrorCode.DUPLICATE_PERSON,
                "This person already exists in the address book",
                {"name": person.name.full_name}
            )
        self._persons.append(person)
        logger.info(f"Added person {person.name}")

    def set_person(self, target: Person, edited_person: Person) -> None:
        """
        Replace ``target`` with ``edited_person``.

        Raises:
            ValidationError: If target is absent, or the edit would clash with another person
        """
        index = self._index_of(target)
        if not target.is_same_person(edited_person) and self.has_person(edited_person):
            raise ValidationError(
                ErrorCode.DUPLICATE_PERSON,
                "This person already exists in the address book",
                {"name": edited_person.name.full_name}
            )
        self._persons[index] = edited_person
        logger.info(f"Updated person {target.name}")

    def remove_person(self, person: Person) -> None:
        """
        Remove a person from the address book.

        Raises:
            ValidationError: If the person is not present
        """
        index = self._index_of(person)
        del self._persons[index]
        logger.info(f"Removed person {person.name}")

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace the contents of the address book. Rejects lists with duplicates."""
        persons = list(persons)
        for i, person in enumerate(persons):
            if any(person.is_same_person(other) for other in persons[i + 1:]):
                raise ValidationError(
                    ErrorCode.DUPLICATE_PERSON,
                    "Persons must be unique",
                    {"name": person.name.full_name}
                )
        self._persons = persons

    def get_person_list(self) -> Tuple[Person, ...]:
        """Get a read-only snapshot of the persons."""
        return tuple(self._persons)

    def _index_of(self, person: Person) -> int:
        for i, existing in enumerate(self._persons):
            if existing == person:
                return i
        raise ValidationError(
            ErrorCode.PERSON_NOT_FOUND,
            "The person could not be found in the address book",
            {"name": person.name.full_name}
        )

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons
