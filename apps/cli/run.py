# apps/cli/run.py
"""
CLI entry point for simulated solving runs.

This script:
  1) Validates the dictionary (prints count + SHA, checks one word length).
  2) Instantiates the requested solver.
  3) Plays every (or a sample of) dictionary word as the hidden answer,
     with a progress bar, and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, dictionary report, summary, git commit

Usage:
    python -m apps.cli.run --dictionary data/words_5.txt --solver distinct_letters --sample 200
"""

from __future__ import annotations

import argparse
import random
from pathlib import Path
from typing import List

from packages.datasets import validate_dictionary, pretty_summary, load_dictionary
from packages.harness import run_batch, summarize, MAX_ROUNDS, ROUNDS_PER_BOARD
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.logging_utils import set_level
from packages.solvers import create_solver, get_solver_ids


def _words_of_length(words: List[str], N: int) -> List[str]:
    return [w for w in words if len(w) == N]


def main(argv: List[str] | None = None):
    """
    Parse CLI args, validate the dictionary, run the batch, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Simulate games against the constraint engine")
    ap.add_argument("--dictionary", required=True, help="word list, one word per line")
    ap.add_argument("--answers", help="hidden answers to play (default: the dictionary)")
    ap.add_argument("--solver", default="distinct_letters",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--fold-accents", action="store_true",
                    help="replace accented vowels with plain ones before solving")
    ap.add_argument("--max-rounds", type=int, default=MAX_ROUNDS)
    ap.add_argument("--rounds-per-board", type=int, default=ROUNDS_PER_BOARD)
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    set_level(args.log_level.upper())

    # 1) Validate and load
    rep = validate_dictionary(args.dictionary)
    print(pretty_summary(rep))
    if not rep["exists"] or not rep["count"]:
        raise SystemExit(f"Unusable dictionary: {rep['issues']}")

    # The engine needs one word length; keep only words of the detected N.
    N = rep["N"]
    dictionary = _words_of_length(load_dictionary(args.dictionary, fold_accents=args.fold_accents), N)
    answers = (_words_of_length(load_dictionary(args.answers, fold_accents=args.fold_accents), N)
               if args.answers else list(dictionary))
    if not answers:
        raise SystemExit(f"No answers of length {N} to play")

    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        raise SystemExit(str(e)) from e

    # 2) Shuffle deterministically by seed; run_batch plays the first --sample
    random.Random(args.seed).shuffle(answers)

    # 3) Run
    results = run_batch(solver, answers, dictionary=dictionary, max_rounds=args.max_rounds,
                        rounds_per_board=args.rounds_per_board, seed=args.seed,
                        sample=args.sample, progress=not args.no_progress)
    for r in results:
        r["solver_id"] = solver.id

    summary = summarize(results)
    print(f"{solver.id}: won {summary['wins']}/{summary['games']} "
          f"({summary['win_rate']:.1%}), mean guesses {summary['mean_guesses']}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_rounds=args.max_rounds, N=N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
