"""Command-line interface for tmx_utils.

Parses inputs, calls the library helpers and presents results. Library code
never imports from here.
"""
