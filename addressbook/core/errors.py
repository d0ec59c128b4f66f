"""
Core error definitions for the address book

Provides error codes and the validation exception shared by the model,
the sample data utilities and the test fixtures.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes for the application."""

    # Generic Errors
    INVALID_DATA = "INVALID_DATA"
    MISSING_DATA = "MISSING_DATA"

    # Person Field Errors
    INVALID_NAME = "INVALID_NAME"
    INVALID_PHONE = "INVALID_PHONE"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    INVALID_TAG = "INVALID_TAG"
    TOO_MANY_TAGS = "TOO_MANY_TAGS"

    # Module Errors
    INVALID_MODULE_CODE = "INVALID_MODULE_CODE"
    INVALID_ROLE_TYPE = "INVALID_ROLE_TYPE"
    MODULE_ROLE_LENGTH_MISMATCH = "MODULE_ROLE_LENGTH_MISMATCH"

    # Address Book Errors
    DUPLICATE_PERSON = "DUPLICATE_PERSON"
    PERSON_NOT_FOUND = "PERSON_NOT_FOUND"


class ValidationError(Exception):
    """Custom exception for validation errors."""

    def __init__(self, code: ErrorCode, message: str, details: Optional[Dict] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)
