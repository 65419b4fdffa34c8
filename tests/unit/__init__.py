"""Unit tests.

Purpose
- Check one helper module in isolation, mostly as input/output tables.

Guidelines
- No network and no writes outside ``tmp_path``.
- Randomized helpers (email censoring) are checked by shape, not exact output.
"""
