"""TMX Utils

A small collection of everyday helpers: turning lists of names into prose,
reading trimmed lines of input, clamping and interpolating numbers, and
running tests with a teardown step that always runs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
