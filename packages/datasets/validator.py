"""
Dictionary validator.

What this module does:
- Validate one word list (one word per line) before handing it to a
  ConstraintEngine, which itself assumes every word has the same length.
- Enforce formatting rules (lowercase, letters only, one length throughout).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: Optional[int]     # word length (given, or most common length found)
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: Optional[int]) -> Tuple[List[str], int, Optional[int]]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line, already lowercase, letters only
      - exact length N; when N is None the most common length is used
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count, N)
    """
    tokens = [raw.strip() for raw in path.read_text(encoding="utf-8").splitlines()]
    shaped = [w for w in tokens if w and w == w.lower() and w.isalpha()]

    if N is None and shaped:
        N = Counter(len(w) for w in shaped).most_common(1)[0][0]

    valid = [w for w in shaped if len(w) == N]
    return valid, len(tokens) - len(valid), N


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str, N: Optional[int] = None) -> Dict:
    """
    Validate a dictionary file.

    Parameters
    ----------
    path : str
        One word per line.
    N : int, optional
        Required word length. Detected from the file when omitted.

    Returns
    -------
    Dict
        JSON-serializable DictionaryReport; `passed` requires a non-empty
        list with no invalid lines.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, N, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid, N = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append("dictionary contains duplicate lines")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
