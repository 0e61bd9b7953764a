"""Unit tests.

Purpose
- Verify the affiliation value object, the unique affiliation list, the
  persistence mapper and the CLI helpers in isolation.

Guidelines
- No real I/O; the domain is pure and needs no fakes.
- Every test under this folder is marked `unit` automatically (see conftest.py).
"""
