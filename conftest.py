"""
Global pytest configuration and fixtures.
Provides configuration reset and shared person fixtures for tests.
"""

import os
import textwrap

import pytest

# Ensure testing environment
os.environ['ADDRESSBOOK_ENV'] = 'testing'


def pytest_configure(config):
    """Configure logging for the test session from the environment configuration."""
    from config_factory import configure_logging, load_config, reset_config

    configure_logging(load_config())
    reset_config()


@pytest.fixture(scope="function", autouse=True)
def reset_global_config():
    """Reset the global configuration before and after each test to ensure clean state."""
    from config_factory import reset_config

    reset_config()
    yield
    reset_config()


@pytest.fixture(scope="function")
def person_builder():
    """Provide a PersonBuilder holding the default details."""
    from tests.factories.person_builder import PersonBuilder
    return PersonBuilder()


@pytest.fixture(scope="function")
def typical_persons():
    """Provide the typical persons roster."""
    from tests.factories.person_factory import PersonFactory
    return PersonFactory.get_typical_persons()


@pytest.fixture(scope="function")
def sample_yaml_file(tmp_path):
    """Write a small, valid sample persons YAML file and return its path."""
    path = tmp_path / "sample_persons.yaml"
    path.write_text(textwrap.dedent("""\
        persons:
          - name: Alex Yeoh
            phone: "87438807"
            email: alexyeoh@example.com
            address: "Blk 30 Geylang Street 29, #06-40"
            tags: [friends]
            modules:
              CS2103T: student
          - name: Bernice Yu
            phone: "99272758"
            email: berniceyu@example.com
            tags: [colleagues, friends]
            modules:
              CS2103T: Tutor
              CS2101: student
        """), encoding='utf-8')
    return str(path)
