"""
Test package marker, so shared helpers import as `tests.mock` and `tests.golden`.
"""
