"""Unit tests.

Purpose
- Verify a single module/function in isolation.

Guidelines
- No real stdin or working-directory I/O; use in-memory streams and tmp_path.
- Prefer behavior-centric assertions over implementation details.
"""
