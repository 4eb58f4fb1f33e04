from enum import Enum


# ---------------------------------------------------------------------------
# Bar State Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class BarState(Enum):
    DEFAULT   = "default"     # resting colour
    COMPARING = "comparing"   # amber: the two values being inspected RIGHT NOW
    SWAPPING  = "swapping"    # rose: about to move / just moved
    SORTED    = "sorted"      # emerald: terminal "mark sorted" sweep

    @classmethod
    def parse(cls, value) -> "BarState":
        """Accept either a BarState or its string value."""
        if isinstance(value, cls):
            return value
        return cls(value)
