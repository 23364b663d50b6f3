"""
Simulated games: a solver, a ConstraintEngine and a hidden answer.

- run_case:  play one answer until it is found, the engine runs dry, or the
             round budget is spent.
- run_batch: run many answers in sequence (optionally a sample prefix).
- summarize: aggregate a batch into a few numbers.

Each round: the solver picks a word from the engine's candidates, the word is
scored against the answer, the score is split into confirmed / misplaced /
absent feedback and fed to `engine.solve`. A game is won when the guess is
the answer, or when the engine is left with exactly one candidate and that
candidate is the answer.

A board allows ROUNDS_PER_BOARD guesses; when it fills up the game moves to a
fresh board and keeps its accumulated feedback, up to MAX_ROUNDS in total.
"""

from __future__ import annotations
import sys
import time
from typing import Dict, List, Iterable, Tuple

import numpy as np
from tqdm import tqdm

from packages.engine import ConstraintEngine, score, feedback_from_pattern, is_solved
from packages.logging_utils import get_logger

ROUNDS_PER_BOARD = 6
MAX_ROUNDS = ROUNDS_PER_BOARD * 2

log = get_logger("harness")


def _assert_round_budget(max_rounds: int, rounds_per_board: int) -> None:
    """Guardrail against budgets that cannot fit a single board."""
    if rounds_per_board < 1:
        raise ValueError(f"rounds_per_board must be >= 1; got {rounds_per_board}")
    if max_rounds < rounds_per_board:
        raise ValueError(
            f"max_rounds ({max_rounds}) must be at least rounds_per_board ({rounds_per_board})")


def run_case(
        solver,
        answer: str,
        *,
        dictionary: Iterable[str],
        max_rounds: int = MAX_ROUNDS,
        rounds_per_board: int = ROUNDS_PER_BOARD,
        seed: int | None = None,
) -> Dict:
    """
    Play one game.

    Args:
        solver:           a BaseSolver (next_guess(state) -> word)
        answer:           the hidden word
        dictionary:       words the engine narrows (should contain `answer`)
        max_rounds:       total guesses allowed across boards
        rounds_per_board: guesses per board before starting a new one
        seed:             RNG seed for solver tie-breaks

    Returns:
        dict with keys:
            answer, success, guesses, boards, solved_by ("guess" | "deduction" | None),
            remaining (candidates left), time_ms, history (list[(guess, pattern)])
    """
    _assert_round_budget(max_rounds, rounds_per_board)
    answer = answer.strip().lower()

    engine = ConstraintEngine(dictionary)
    solver.reset(dictionary=engine.words, N=engine.N, seed=seed)

    history: List[Tuple[str, str]] = []
    candidates = engine.possible_words
    solved_by = None

    t0 = time.perf_counter()
    for turn in range(1, max_rounds + 1):
        state = {
            "turn": turn,
            "board_turn": (turn - 1) % rounds_per_board + 1,
            "history": list(history),
            "candidates": candidates,
            "N": engine.N,
            "rng": solver.rng,
        }
        guess = solver.next_guess(state).lower()
        patt = score(guess, answer)
        history.append((guess, patt))

        if is_solved(patt):
            solved_by = "guess"
            break

        candidates = engine.solve(feedback_from_pattern(guess, patt))

        if not candidates:
            log.debug("%s: no candidates left after %d round(s)", answer, turn)
            break
        if len(candidates) == 1:
            if candidates[0] == answer:
                solved_by = "deduction"
            break

    dt = (time.perf_counter() - t0) * 1000.0
    guesses = len(history)
    result = {
        "answer": answer,
        "success": solved_by is not None,
        "guesses": guesses,
        "boards": (guesses - 1) // rounds_per_board + 1 if guesses else 0,
        "solved_by": solved_by,
        "remaining": len(candidates),
        "time_ms": dt,
        "history": history,
    }
    log.debug("%s: success=%s in %d round(s)", answer, result["success"], guesses)
    return result


def run_batch(
        solver,
        answers: List[str],
        *,
        dictionary: List[str],
        max_rounds: int = MAX_ROUNDS,
        rounds_per_board: int = ROUNDS_PER_BOARD,
        seed: int | None = None,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are played. `progress` shows a tqdm bar on stderr.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible without every case sharing one RNG stream.
    """
    _assert_round_budget(max_rounds, rounds_per_board)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    desc = getattr(solver, "id", "run")
    iterator = tqdm(pool, ncols=80, desc=desc, unit="game", file=sys.stderr,
                    disable=not progress)

    out: List[Dict] = []
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(
            solver, ans, dictionary=dictionary, max_rounds=max_rounds,
            rounds_per_board=rounds_per_board, seed=case_seed,
        ))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate stats for a batch:
      games, wins, win_rate, mean_guesses / median_guesses (wins only),
      guess_histogram (index = number of guesses, wins only), mean_time_ms.
    """
    if not results:
        return {"games": 0, "wins": 0, "win_rate": 0.0, "mean_guesses": None,
                "median_guesses": None, "guess_histogram": [], "mean_time_ms": 0.0}

    success = np.array([bool(r["success"]) for r in results])
    guesses = np.array([int(r["guesses"]) for r in results])
    times = np.array([float(r["time_ms"]) for r in results])
    won = guesses[success]

    return {
        "games": int(success.size),
        "wins": int(success.sum()),
        "win_rate": float(success.mean()),
        "mean_guesses": float(won.mean()) if won.size else None,
        "median_guesses": float(np.median(won)) if won.size else None,
        "guess_histogram": np.bincount(won).tolist() if won.size else [],
        "mean_time_ms": float(times.mean()),
    }
