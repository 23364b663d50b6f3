"""
Wordle-style scoring of a guess, and turning a scored guess into feedback.

Pattern conventions:
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

`feedback_from_pattern` reads a scored row the way the board reader does,
one cell at a time:
  confirmed  += letter if green  else '-'
  misplaced  += letter if yellow else '-'
  absent     += letter if gray   (nothing otherwise)

so the result can be handed straight to ConstraintEngine.solve().
"""

from collections import Counter
from typing import Literal

from .feedback import SolveParams

# Each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    n = len(guess)
    pattern = ["-"] * n

    # Greens first; count what is left of the answer for the yellows.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    # Yellows are capped by how many copies the answer still has.
    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and set(pattern) == {"G"}


def feedback_from_pattern(guess: str, pattern: str) -> SolveParams:
    """
    Split a scored guess into the three feedback strings.

    Example:
      feedback_from_pattern("raise", "YY--G")
        -> SolveParams(confirmed="----e", misplaced="ra---", absent="is")
    """
    guess = guess.strip().lower()
    if len(guess) != len(pattern):
        raise ValueError(f"pattern {pattern!r} does not match guess {guess!r}")

    confirmed = ""
    misplaced = ""
    absent = ""
    for letter, cell in zip(guess, pattern.upper()):
        confirmed += letter if cell == "G" else "-"
        misplaced += letter if cell == "Y" else "-"
        absent += letter if cell == "-" else ""
    return SolveParams(confirmed=confirmed, misplaced=misplaced, absent=absent)
