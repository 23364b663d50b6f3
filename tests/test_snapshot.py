import pytest
from pathlib import Path
from packages.engine import ConstraintEngine, SolveParams
from packages.harness import write_snapshot, read_snapshot

WORDS = ["crane", "crate", "trace", "cabin", "caret", "react", "actor", "cider"]

ROUNDS = [
    SolveParams(confirmed="c____", misplaced="-r---", absent="b"),
    SolveParams(misplaced="--e--", absent="o"),
    SolveParams(misplaced="-r---"),
]


def _played():
    engine = ConstraintEngine(WORDS)
    for r in ROUNDS:
        engine.solve(r)
    return engine


def test_export_shape():
    snap = _played().export_state()
    assert snap == {
        "confirmedLetters": "c____",
        "misplacedRounds": ["_r___", "__e__"],
        "absentLetters": "bo",
    }


def test_restore_matches_original():
    original = _played()
    fresh = ConstraintEngine(WORDS)
    assert fresh.restore_from(original.export_state()) == original.possible_words
    assert fresh.export_state() == original.export_state()


def test_restore_discards_previous_feedback():
    original = _played()
    other = ConstraintEngine(WORDS)
    other.solve(SolveParams(confirmed="a____"))
    other.restore_from(original.export_state())
    assert other.possible_words == original.possible_words


def test_poisoned_snapshot_round_trips():
    engine = ConstraintEngine(WORDS)
    engine.solve(SolveParams(confirmed="c____"))
    engine.solve(SolveParams(confirmed="t____"))
    fresh = ConstraintEngine(WORDS)
    assert fresh.restore_from(engine.export_state()) == []
    assert fresh.state.poisoned


def test_malformed_snapshot_rejected():
    with pytest.raises(ValueError):
        ConstraintEngine(WORDS).restore_from({"confirmedLetters": "c____"})


def test_snapshot_file_round_trip(tmp_path: Path):
    original = _played()
    path = write_snapshot(original.export_state(), str(tmp_path / "state.json"))
    fresh = ConstraintEngine(WORDS)
    assert fresh.restore_from(read_snapshot(path)) == original.possible_words


def test_read_snapshot_rejects_other_json(tmp_path: Path):
    p = tmp_path / "manifest.json"
    p.write_text('{"run_id": "x"}', encoding="utf-8")
    with pytest.raises(ValueError):
        read_snapshot(str(p))
