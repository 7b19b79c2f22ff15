"""Functional tests: the `tmx-utils` CLI driven through Click's CliRunner."""
