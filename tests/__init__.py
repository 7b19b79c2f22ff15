"""tmx-utils test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/function.
- functional/   : User-visible CLI flows tested end-to-end through Click.
- fixtures/     : Shared pytest fixtures, loaded via ``pytest_plugins``.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; use in-memory streams and
  ``tmp_path`` rather than real stdin or the working directory.
- Functional tests assert user-observable output and exit codes only.
- Property-based tests live beside the unit tests they extend and use
  @pytest.mark.property.
"""
