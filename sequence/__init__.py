"""
sequence/
---------
Core data layer.  Public API:

    from sequence import Sequence, BarState
    from sequence import MIN_VALUE, MAX_VALUE
"""

from sequence.bar      import BarState
from sequence.sequence import Sequence, MIN_VALUE, MAX_VALUE

__all__ = [
    "BarState",
    "Sequence",
    "MIN_VALUE",
    "MAX_VALUE",
]
