import pytest
from packages.engine import ConstraintEngine, SolveParams, POISON_CHAR

WORDS = ["crane", "crate", "trace", "cabin"]


def test_crane_scenario():
    engine = ConstraintEngine(WORDS)
    assert engine.N == 5
    assert engine.possible_words == WORDS
    assert engine.solve(SolveParams(confirmed="cra__", misplaced="", absent="b")) == ["crane", "crate"]
    assert engine.possible_words == ["crane", "crate"]


def test_solve_accepts_camel_case_dict():
    engine = ConstraintEngine(WORDS)
    got = engine.solve({"validLetters": "CRA__", "notInPlaceLetters": "", "invalidLetters": "b"})
    assert got == ["crane", "crate"]


def test_dictionary_is_normalized():
    engine = ConstraintEngine([" Crane", "CRATE "])
    assert engine.words == ["crane", "crate"]


def test_empty_dictionary_rejected():
    with pytest.raises(ValueError):
        ConstraintEngine([])


def test_repeated_round_is_idempotent():
    engine = ConstraintEngine(["abcde", "bacde", "cabde", "fghij"])
    once = engine.solve(SolveParams(misplaced="a----"))
    twice = engine.solve(SolveParams(misplaced="a----"))
    assert once == twice == ["bacde", "cabde"]
    assert len(engine.state.misplaced) == 1


def test_round_order_does_not_matter():
    words = ["abcde", "bacde", "cbade", "ebcda", "cdeab"]
    r1, r2 = SolveParams(misplaced="a----"), SolveParams(misplaced="----a")
    a = ConstraintEngine(words)
    for r in (r1, r2, r1):
        a.solve(r)
    b = ConstraintEngine(words)
    for r in (r2, r1):
        b.solve(r)
    assert a.possible_words == b.possible_words == ["bacde", "cbade", "cdeab"]


def test_conflicting_confirmations_poison_until_reset():
    engine = ConstraintEngine(["abcd", "axcd", "aycd"])
    assert engine.solve(SolveParams(confirmed="ax__")) == ["axcd"]
    assert engine.solve(SolveParams(confirmed="ay__")) == []
    assert engine.solve(SolveParams()) == []
    assert engine.solve(SolveParams(confirmed="ax__")) == []
    assert engine.export_state()["confirmedLetters"] == POISON_CHAR * 4

    engine.reset()
    assert engine.possible_words == ["abcd", "axcd", "aycd"]
    assert engine.solve(SolveParams(confirmed="ay__")) == ["aycd"]


def test_reset_can_swap_dictionary():
    engine = ConstraintEngine(WORDS)
    engine.solve(SolveParams(confirmed="c____"))
    engine.reset(["letter", "better"])
    assert engine.N == 6
    assert engine.solve(SolveParams(confirmed="l_____")) == ["letter"]


def test_single_candidate_is_stable():
    engine = ConstraintEngine(WORDS)
    assert engine.solve(SolveParams(confirmed="cra_e", absent="t")) == ["crane"]
    assert engine.solve(SolveParams()) == ["crane"]
    assert engine.solve(SolveParams(confirmed="", misplaced="", absent="")) == ["crane"]


def test_over_long_feedback_is_cut():
    engine = ConstraintEngine(WORDS)
    assert engine.solve(SolveParams(confirmed="cra__zzz")) == ["crane", "crate"]


def test_result_is_a_copy():
    engine = ConstraintEngine(WORDS)
    got = engine.solve(SolveParams(confirmed="cra__"))
    got.clear()
    assert engine.possible_words == ["crane", "crate"]
