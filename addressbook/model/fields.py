"""
Person Field Value Objects

Immutable, validated wrappers around the raw strings that make up a person's
contact details. Construction fails with a ValidationError when the value
does not satisfy the field's constraints.
"""

import re
from dataclasses import dataclass

from addressbook.core.errors import ErrorCode, ValidationError


@dataclass(frozen=True)
class Name:
    """A person's full name."""
    full_name: str

    MESSAGE_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"

    # The first character must not be a whitespace, otherwise " " becomes a valid input
    VALIDATION_PATTERN = re.compile(r'^[A-Za-z0-9][A-Za-z0-9 ]*$')

    def __post_init__(self):
        if not self.is_valid_name(self.full_name):
            raise ValidationError(ErrorCode.INVALID_NAME, self.MESSAGE_CONSTRAINTS, {"value": self.full_name})

    @classmethod
    def is_valid_name(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    """A person's phone number."""
    value: str

    MESSAGE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    VALIDATION_PATTERN = re.compile(r'^\d{3,}$')

    def __post_init__(self):
        if not self.is_valid_phone(self.value):
            raise ValidationError(ErrorCode.INVALID_PHONE, self.MESSAGE_CONSTRAINTS, {"value": self.value})

    @classmethod
    def is_valid_phone(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    """
    A person's email address.

    The local part may contain alphanumerics and the special characters
    ``+_.-`` (never leading, trailing or adjacent). The domain is made of
    dot-separated labels of alphanumerics joined by hyphens; the final label
    is at least two characters long.
    """
    value: str

    SPECIAL_CHARACTERS = "+_.-"
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special characters, "
        f"excluding the parentheses, ({SPECIAL_CHARACTERS}). The local-part may not start or end with "
        "any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
        "separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
    )

    LOCAL_PART_REGEX = r'[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*'
    DOMAIN_PART_REGEX = r'[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*'
    DOMAIN_LAST_PART_REGEX = r'(?=[A-Za-z0-9-]{2,}$)' + DOMAIN_PART_REGEX
    VALIDATION_PATTERN = re.compile(
        rf'^{LOCAL_PART_REGEX}@(?:{DOMAIN_PART_REGEX}\.)*{DOMAIN_LAST_PART_REGEX}$'
    )

    def __post_init__(self):
        if not self.is_valid_email(self.value):
            raise ValidationError(ErrorCode.INVALID_EMAIL, self.MESSAGE_CONSTRAINTS, {"value": self.value})

    @classmethod
    def is_valid_email(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    """A person's address. Can take any value, but must not be blank."""
    value: str

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    VALIDATION_PATTERN = re.compile(r'^\S.*$', re.DOTALL)

    def __post_init__(self):
        if not self.is_valid_address(self.value):
            raise ValidationError(ErrorCode.INVALID_ADDRESS, self.MESSAGE_CONSTRAINTS, {"value": self.value})

    @classmethod
    def is_valid_address(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """A short alphanumeric label attached to a person."""
    tag_name: str

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_PATTERN = re.compile(r'^[A-Za-z0-9]+$')

    def __post_init__(self):
        if not self.is_valid_tag_name(self.tag_name):
            raise ValidationError(ErrorCode.INVALID_TAG, self.MESSAGE_CONSTRAINTS, {"value": self.tag_name})

    @classmethod
    def is_valid_tag_name(cls, test: str) -> bool:
        return isinstance(test, str) and cls.VALIDATION_PATTERN.match(test) is not None

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
