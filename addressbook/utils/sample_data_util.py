"""
Sample Data Utilities for the address book

Provides the tag-set helper used throughout the model and fixtures, a set of
built-in sample persons, and loading/validation of sample persons from YAML.
"""

import logging
from typing import Any, Dict, List, Optional, Set

import yaml

from addressbook.core.role_type import RoleType
from addressbook.model import (
    Address, AddressBook, Email, ModuleCode, ModuleRoleMap, Name, Person, Phone, Tag
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_TAGS_PER_PERSON = 10


def get_tag_set(*tag_strings: str) -> Set[Tag]:
    """
    Parse tag names into a new set of Tag objects.

    Raises:
        ValidationError: If any tag name is invalid
    """
    return {Tag(tag_string) for tag_string in tag_strings}


def get_sample_persons() -> List[Person]:
    """Get the built-in sample persons."""
    return [
        Person(Name("Alex Yeoh"), Phone("87438807"), Email("alexyeoh@example.com"),
               Address("Blk 30 Geylang Street 29, #06-40"),
               get_tag_set("friends"),
               ModuleRoleMap({ModuleCode("CS2103T"): RoleType.STUDENT})),
        Person(Name("Bernice Yu"), Phone("99272758"), Email("berniceyu@example.com"),
               Address("Blk 30 Lorong 3 Serangoon Gardens, #07-18"),
               get_tag_set("colleagues", "friends"),
               ModuleRoleMap({ModuleCode("CS2103T"): RoleType.TUTOR,
                              ModuleCode("CS2101"): RoleType.STUDENT})),
        Person(Name("Charlotte Oliveiro"), Phone("93210283"), Email("charlotte@example.com"),
               Address("Blk 11 Ang Mo Kio Street 74, #11-04"),
               get_tag_set("neighbours"),
               ModuleRoleMap({ModuleCode("CS1101S"): RoleType.STUDENT})),
        Person(Name("David Li"), Phone("91031282"), Email("lidavid@example.com"),
               Address("Blk 436 Serangoon Gardens Street 26, #16-43"),
               get_tag_set("family"),
               ModuleRoleMap({ModuleCode("MA1521"): RoleType.STUDENT})),
        Person(Name("Irfan Ibrahim"), Phone("92492021"), Email("irfan@example.com"),
               None,
               get_tag_set("classmates"),
               ModuleRoleMap({ModuleCode("CS2103T"): RoleType.STUDENT})),
        Person(Name("Roy Balakrishnan"), Phone("92624417"), Email("royb@example.com"),
               Address("Blk 45 Aljunied Street 85, #11-31"),
               get_tag_set("colleagues"),
               ModuleRoleMap({ModuleCode("CS1101S"): RoleType.PROFESSOR})),
    ]


class SampleDataValidationError(Exception):
    """Raised when YAML sample data validation fails."""
    pass


class SampleDataLoader:
    """Loads and validates sample persons from YAML files."""

    def __init__(self, yaml_file_path: str = "sample_persons.yaml",
                 max_tags_per_person: Optional[int] = None):
        """
        Initialize SampleDataLoader with path to YAML file.

        Args:
            yaml_file_path: Path to the YAML file containing sample persons
            max_tags_per_person: Tag limit per person; read from configuration when omitted

        Raises:
            SampleDataValidationError: If an explicit tag limit is below 1
        """
        if max_tags_per_person is None:
            max_tags_per_person = self._configured_max_tags()
        elif max_tags_per_person < 1:
            raise SampleDataValidationError(f"Invalid max_tags_per_person: {max_tags_per_person}")

        self.yaml_file_path = yaml_file_path
        self.max_tags_per_person = max_tags_per_person
        self.persons: List[Person] = []
        self._loaded = False

    @staticmethod
    def _configured_max_tags() -> int:
        from config_factory import ConfigError, get_config
        try:
            return get_config().max_tags_per_person
        except ConfigError:
            return DEFAULT_MAX_TAGS_PER_PERSON

    def load_persons_from_yaml(self) -> None:
        """
        Load sample persons from the YAML file.

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            SampleDataValidationError: If YAML structure is invalid
            yaml.YAMLError: If YAML parsing fails
            ValidationError: If a field value is rejected by the model
        """
        try:
            with open(self.yaml_file_path, 'r', encoding='utf-8') as file:
                data = yaml.safe_load(file)

            self.validate_yaml_structure(data)
            self.persons = self._parse_persons(data)
            self._loaded = True
            logger.info(f"Successfully loaded {len(self.persons)} sample persons from {self.yaml_file_path}")

        except FileNotFoundError:
            logger.error(f"YAML file not found: {self.yaml_file_path}")
            raise
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            raise
        except SampleDataValidationError as e:
            logger.error(f"Sample data validation error: {e}")
            raise

    def validate_yaml_structure(self, data: Any) -> None:
        """
        Validate the structure of loaded YAML data.

        Args:
            data: Parsed YAML data to validate

        Raises:
            SampleDataValidationError: If structure is invalid
        """
        if not isinstance(data, dict):
            raise SampleDataValidationError("YAML root must be a dictionary")

        if 'persons' not in data:
            raise SampleDataValidationError("YAML must contain 'persons' key")

        persons = data['persons']
        if not isinstance(persons, list):
            raise SampleDataValidationError("'persons' must be a list")

        if len(persons) == 0:
            raise SampleDataValidationError("'persons' list cannot be empty")

        required_fields = {'name', 'phone', 'email'}

        for i, person_item in enumerate(persons):
            if not isinstance(person_item, dict):
                raise SampleDataValidationError(f"Person item {i} must be a dictionary")

            missing_fields = required_fields - set(person_item.keys())
            if missing_fields:
                raise SampleDataValidationError(
                    f"Person item {i} missing required fields: {sorted(missing_fields)}"
                )

            for field in ['name', 'phone', 'email']:
                if not isinstance(person_item[field], str):
                    raise SampleDataValidationError(
                        f"Person item {i} field '{field}' must be a string"
                    )

            address = person_item.get('address')
            if address is not None and not isinstance(address, str):
                raise SampleDataValidationError(
                    f"Person item {i} field 'address' must be a string"
                )

            tags = person_item.get('tags') or []
            if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
                raise SampleDataValidationError(
                    f"Person item {i} 'tags' must be a list of strings"
                )
            if len(tags) > self.max_tags_per_person:
                raise SampleDataValidationError(
                    f"Person item {i} has {len(tags)} tags, the limit is {self.max_tags_per_person}"
                )

            modules = person_item.get('modules') or {}
            if not isinstance(modules, dict):
                raise SampleDataValidationError(
                    f"Person item {i} 'modules' must be a mapping of module code to role"
                )

        # Check for duplicate names
        names = [item['name'] for item in persons]
        if len(names) != len(set(names)):
            raise SampleDataValidationError("Duplicate person names found")

    def _parse_persons(self, data: Dict[str, Any]) -> List[Person]:
        """
        Parse validated YAML data into Person objects.

        Args:
            data: Validated YAML data

        Returns:
            List of Person objects
        """
        persons = []
        for item in data['persons']:
            address = item.get('address')
            module_role_map = ModuleRoleMap({
                ModuleCode(str(code)): RoleType.from_string(role)
                for code, role in (item.get('modules') or {}).items()
            })

            person = Person(
                name=Name(item['name']),
                phone=Phone(item['phone']),
                email=Email(item['email']),
                address=Address(address) if address is not None else None,
                tags=get_tag_set(*(item.get('tags') or [])),
                module_role_map=module_role_map
            )
            persons.append(person)

        return persons

    def get_all_persons(self) -> List[Person]:
        """
        Get all loaded persons.

        Raises:
            RuntimeError: If no persons are loaded
        """
        if not self._loaded:
            raise RuntimeError("No sample persons loaded. Call load_persons_from_yaml() first.")

        return self.persons.copy()

    def is_loaded(self) -> bool:
        """Check if sample persons have been loaded."""
        return self._loaded

    def get_person_count(self) -> int:
        """Get the number of loaded persons."""
        return len(self.persons) if self._loaded else 0


def get_sample_address_book(yaml_file_path: Optional[str] = None) -> AddressBook:
    """
    Create an address book filled with sample persons.

    Args:
        yaml_file_path: Optional YAML file to load from instead of the built-in samples.
            Falls back to the configured sample_data_file.
    """
    if yaml_file_path is None:
        from config_factory import ConfigError, get_config
        try:
            yaml_file_path = get_config().sample_data_file
        except ConfigError:
            yaml_file_path = None

    if yaml_file_path is None:
        return AddressBook(get_sample_persons())

    loader = SampleDataLoader(yaml_file_path)
    loader.load_persons_from_yaml()
    return AddressBook(loader.get_all_persons())
