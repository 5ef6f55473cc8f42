"""Test package marker.

What:
  Marks ``tests`` as a package so the root ``conftest`` is importable as
  ``tests.conftest`` and does not clash with ``tests/unit/conftest.py``.

Invariants & Safety:
  - The file must remain side-effect free.
"""
