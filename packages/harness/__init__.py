from .core import run_case, run_batch, summarize, MAX_ROUNDS, ROUNDS_PER_BOARD
from .io import write_csv, write_manifest, write_snapshot, read_snapshot

__all__ = ["run_case", "run_batch", "summarize", "MAX_ROUNDS", "ROUNDS_PER_BOARD",
           "write_csv", "write_manifest", "write_snapshot", "read_snapshot"]
