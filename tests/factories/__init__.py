"""
Test Data Factories and Builders

This module provides factories and builders for creating person test data,
eliminating brittle test setup and hardcoded test values.

The builder provides a fluent interface for customizing a single person while
the factory supplies a fixed roster of typical persons and batch helpers.
"""

from tests.factories.person_builder import PersonBuilder
from tests.factories.person_factory import PersonFactory

__all__ = [
    'PersonBuilder',
    'PersonFactory'
]
