"""
errors.py — Engine failure kinds.
"""


class SortInvariantError(RuntimeError):
    """An algorithm finished but left the sequence unsorted or changed its values."""
