"""
Per-round feedback as reported by the game board.

A round of feedback is three positional strings:
  - confirmed : letter at the index it occupies in the answer ("green")
  - misplaced : letter present in the answer, but not at this index ("yellow")
  - absent    : letters with no (further) occurrence in the answer ("gray")

Any of the EMPTY_MARKERS means "no information at this slot". They are folded
into the single UNKNOWN tag here, at the boundary, so the rest of the engine
never has to know which marker the caller used.

Examples:
  SolveParams(confirmed="cr-n-", misplaced="--a--", absent="e")
  SolveParams.from_dict({"validLetters": "cr_n_", "notInPlaceLetters": "",
                         "invalidLetters": "e"})
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Characters accepted as "no claim at this index".
EMPTY_MARKERS = frozenset({"_", " ", "-", "·"})

# Internal tag for an unknown slot (never equal to a letter).
UNKNOWN: Optional[str] = None

Slots = Tuple[Optional[str], ...]

# Accepted key spellings for SolveParams.from_dict
_KEY_ALIASES = {
    "confirmed": ("confirmed", "validLetters", "valid_letters"),
    "misplaced": ("misplaced", "notInPlaceLetters", "not_in_place_letters"),
    "absent": ("absent", "invalidLetters", "invalid_letters"),
}


@dataclass(frozen=True)
class SolveParams:
    """One round of feedback. All fields default to "no information"."""
    confirmed: str = ""
    misplaced: str = ""
    absent: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "SolveParams":
        values = {}
        for field, aliases in _KEY_ALIASES.items():
            values[field] = next((data[k] for k in aliases if data.get(k) is not None), "")
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        return {"confirmed": self.confirmed, "misplaced": self.misplaced, "absent": self.absent}


def clean(raw: Optional[str]) -> str:
    """Lowercase and strip trailing whitespace (leading blanks are positional)."""
    return (raw or "").lower().rstrip()


def is_empty(ch: Optional[str]) -> bool:
    return ch is UNKNOWN or ch in EMPTY_MARKERS


def to_slots(raw: Optional[str], length: int) -> Slots:
    """
    Positional string -> tuple of exactly `length` slots (letter or UNKNOWN).

    Shorter strings are padded with UNKNOWN; characters past `length` are
    dropped without complaint.
    """
    s = clean(raw)[:length]
    slots = [UNKNOWN if is_empty(ch) else ch for ch in s]
    slots.extend([UNKNOWN] * (length - len(slots)))
    return tuple(slots)


def letters_of(raw: Optional[str]) -> str:
    """Absent-letter string -> just its letters, markers removed."""
    return "".join(ch for ch in clean(raw) if not is_empty(ch))


def slots_to_str(slots: Slots, marker: str = "_") -> str:
    return "".join(marker if ch is UNKNOWN else ch for ch in slots)
