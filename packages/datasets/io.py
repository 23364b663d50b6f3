from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from .accents import normalize_accents


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_dictionary(p: Path | str, *, fold_accents: bool = False) -> List[str]:
    """
    Word list for a ConstraintEngine: lowercased, blanks dropped, file order kept.
    With fold_accents=True, accented vowels are replaced by plain ones.
    """
    words = [ln.strip().lower() for ln in read_lines(p) if ln.strip()]
    if fold_accents:
        words = [normalize_accents(w) for w in words]
    return words
