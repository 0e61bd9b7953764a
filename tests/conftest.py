"""Global pytest fixtures for ADDRESSBOOK."""

pytest_plugins = [
    "tests.fixtures.affiliations",
]
