"""Global pytest configuration for tmx-utils."""

pytest_plugins = [
    "tests.fixtures.streams",
]
