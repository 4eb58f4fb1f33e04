"""
event.py — Algorithm Event Stream
==================================
Every sorting algorithm is a generator that yields Event objects.
An Event is one discrete observable step:

    • COMPARE(i, j)      – the algorithm inspects a[i] against a[j]
    • SWAP(i, j)         – a[i] and a[j] exchange places
    • OVERWRITE(k, v)    – a[k] is replaced by v (merge write-back)

Design decisions:
  - Event is a plain frozen dataclass.  It describes a step, it does not
    perform it.  The generators only READ the list they were given; the
    consumer applies each SWAP / OVERWRITE with `apply_event` before it
    asks for the next event.  That is what lets the controller pause
    before and after a mutation.
  - `pseudocode_line` indexes the PSEUDOCODE list exported next to each
    generator so the UI can highlight the executing line.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional


class EventKind(Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    OVERWRITE = "overwrite"


@dataclass(frozen=True)
class Event:
    """
    Attributes:
        kind            : What happened.
        i               : First index (COMPARE / SWAP) or the written index (OVERWRITE).
        j               : Second index for COMPARE / SWAP, None for OVERWRITE.
        value           : The value written by an OVERWRITE, None otherwise.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable text for the step panel.
    """

    kind:            EventKind
    i:               int
    j:               Optional[int] = None
    value:           Optional[int] = None
    pseudocode_line: int           = 0
    explanation:     str           = ""

    @property
    def indices(self) -> List[int]:
        """Positions touched by this event, in order."""
        if self.j is None:
            return [self.i]
        return [self.i, self.j]

    def to_dict(self) -> dict:
        return {
            "kind":            self.kind.value,
            "i":               self.i,
            "j":               self.j,
            "value":           self.value,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


# ---------------------------------------------------------------------------
# Constructors so generators read like the textbook
# ---------------------------------------------------------------------------
def compare(i: int, j: int, line: int = 0, explanation: str = "") -> Event:
    return Event(EventKind.COMPARE, i, j, pseudocode_line=line, explanation=explanation)


def swap(i: int, j: int, line: int = 0, explanation: str = "") -> Event:
    return Event(EventKind.SWAP, i, j, pseudocode_line=line, explanation=explanation)


def overwrite(k: int, value: int, line: int = 0, explanation: str = "") -> Event:
    return Event(EventKind.OVERWRITE, k, value=value, pseudocode_line=line, explanation=explanation)


# ---------------------------------------------------------------------------
# Consumers
# ---------------------------------------------------------------------------
def apply_event(values: List[int], event: Event) -> None:
    """Perform the mutation an event describes.  COMPARE is a no-op."""
    if event.kind is EventKind.SWAP:
        values[event.i], values[event.j] = values[event.j], values[event.i]
    elif event.kind is EventKind.OVERWRITE:
        values[event.i] = event.value


def drain(
    fn: Callable[[List[int]], Iterator[Event]],
    values: List[int],
    on_event: Optional[Callable[[Event], None]] = None,
) -> List[Event]:
    """
    Run an algorithm to completion with no pacing, mutating `values`
    in place.  Returns every event in the order it was produced.
    """
    events: List[Event] = []
    for event in fn(values):
        apply_event(values, event)
        events.append(event)
        if on_event:
            on_event(event)
    return events
