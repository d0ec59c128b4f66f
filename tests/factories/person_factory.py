"""
Person Data Factory

Provides a fixed roster of typical persons plus factory methods for
creating person test data with consistent, realistic values.
"""

from typing import List

from addressbook.core.role_type import RoleType
from addressbook.model import AddressBook, ModuleCode, Person
from tests.factories.person_builder import PersonBuilder

CS2103T = ModuleCode("CS2103T")
CS2101 = ModuleCode("CS2101")
MA1521 = ModuleCode("MA1521")

ALICE = (PersonBuilder().with_name("Alice Pauline")
         .with_address("123, Jurong West Ave 6, #08-111").with_email("alice@example.com")
         .with_phone("94351253")
         .with_tags("friends").build())
BENSON = (PersonBuilder().with_name("Benson Meier")
          .with_address("311, Clementi Ave 2, #02-25")
          .with_email("johnd@example.com").with_phone("98765432")
          .with_tags("owesMoney", "friends")
          .with_module_role_map([CS2103T, CS2101], [RoleType.STUDENT, RoleType.STUDENT]).build())
CARL = (PersonBuilder().with_name("Carl Kurz").with_phone("95352563")
        .with_email("heinz@example.com").with_address("wall street").build())
DANIEL = (PersonBuilder().with_name("Daniel Meier").with_phone("87652533")
          .with_email("cornelia@example.com").with_address("10th street").with_tags("friends")
          .with_module_role_map(CS2103T, RoleType.TUTOR).build())
ELLE = (PersonBuilder().with_name("Elle Meyer").with_phone("9482224")
        .with_email("werner@example.com").build_empty_address_person())
FIONA = (PersonBuilder().with_name("Fiona Kunz").with_phone("9482427")
         .with_email("lydia@example.com").with_address("little tokyo")
         .with_module_role_map(MA1521, RoleType.STUDENT).build())
GEORGE = (PersonBuilder().with_name("George Best").with_phone("9482442")
          .with_email("anna@example.com").with_address("4th street")
          .with_module_role_map(CS2103T, RoleType.PROFESSOR).build())

# Manually added
HOON = (PersonBuilder().with_name("Hoon Meier").with_phone("8482424")
        .with_email("stefan@example.com").with_address("little india").build())
IDA = (PersonBuilder().with_name("Ida Mueller").with_phone("8482131")
       .with_email("hans@example.com").with_address("chicago ave").build())

# Detailed persons, mirroring what a user would type in full
AMY = (PersonBuilder().with_name("Amy Bee").with_phone("11111111")
       .with_email("amy@example.com").with_address("Block 312, Amy Street 1")
       .with_tags("friend").build())
BOB = (PersonBuilder().with_name("Bob Choo").with_phone("22222222")
       .with_email("bob@example.com").with_address("Block 123, Bobby Street 3")
       .with_tags("husband", "friend")
       .with_module_role_map(CS2103T, RoleType.TUTOR).build())

KEYWORD_MATCHING_MEIER = "Meier"


class PersonFactory:
    """Factory for creating person test data"""

    @staticmethod
    def get_typical_persons() -> List[Person]:
        """Get the typical persons, in a fixed order"""
        return [ALICE, BENSON, CARL, DANIEL, ELLE, FIONA, GEORGE]

    @classmethod
    def get_typical_address_book(cls) -> AddressBook:
        """Create an address book holding all the typical persons"""
        address_book = AddressBook()
        for person in cls.get_typical_persons():
            address_book.add_person(person)
        return address_book

    @staticmethod
    def create_person(**overrides) -> Person:
        """
        Create a person from the builder defaults.

        Keyword arguments map to the builder's ``with_*`` methods, e.g.
        ``create_person(name="Zoe", tags=["friends"])``. Pass
        ``address=None`` for a person without an address.
        """
        builder = PersonBuilder()
        for field_name, value in overrides.items():
            if field_name == 'address' and value is None:
                builder.with_empty_address()
            elif field_name == 'tags':
                builder.with_tags(*value)
            elif field_name == 'module_role_map':
                builder.with_module_role_map(*value)
            else:
                getattr(builder, f"with_{field_name}")(value)
        return builder.build()

    @classmethod
    def create_persons_batch(cls, count: int) -> List[Person]:
        """Create persons with distinct names for batch testing"""
        return [
            cls.create_person(name=f"Test Person {i + 1}", phone=f"9{i + 1:07d}")
            for i in range(count)
        ]

    @staticmethod
    def create_tutor(module_code: ModuleCode, name: str = "Tutor Tan") -> Person:
        """Create a person tutoring the given module"""
        return (PersonBuilder()
                .with_name(name)
                .with_module_role_map(module_code, RoleType.TUTOR)
                .build())
