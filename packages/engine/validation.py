"""
Lightweight input checks the engine itself does not perform.

ConstraintEngine trusts its dictionary: every word is assumed to have the
length of the first one. These helpers let callers check that up front.
"""

from typing import Iterable, List, Set


def dictionary_issues(words: Iterable[str]) -> List[str]:
    """
    Return human-readable problems with a dictionary (empty list = fine).

    Checks: non-empty, one word length throughout, lowercase letters only.
    """
    ws = [w.strip().lower() for w in words]
    if not ws:
        return ["dictionary is empty"]

    issues: List[str] = []
    N = len(ws[0])
    wrong_len = [w for w in ws if len(w) != N]
    if wrong_len:
        issues.append(f"{len(wrong_len)} word(s) differ from length {N} (e.g., {wrong_len[:5]})")
    non_alpha = [w for w in ws if not w.isalpha()]
    if non_alpha:
        issues.append(f"{len(non_alpha)} word(s) contain non-letters (e.g., {non_alpha[:5]})")
    return issues


def validate_guess(word: str, allowed: Iterable[str], N: int) -> bool:
    """
    True if `word` is an N-letter alphabetic word found in `allowed`.

    Notes:
      - builds a set from `allowed` on every call; precompute at a higher
        level if this sits in a tight loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N or not w.isalpha():
        return False

    allowed_set: Set[str] = {a.strip().lower() for a in allowed}
    return w in allowed_set
