from packages.engine import SolveParams, EngineState, ingest, filter_candidates, derive_indexes
from packages.engine.constraints import (
    filter_absent, filter_misplaced_indexes, filter_misplaced_presence,
)


def _state(N, *rounds):
    st = EngineState.empty(N)
    for r in rounds:
        st = ingest(st, r, N)
    return st


def test_settled_letters_must_match():
    words = ["crane", "crate", "trace", "cabin"]
    st = _state(5, SolveParams(confirmed="cra__", absent="b"))
    assert filter_candidates(words, st, 5) == ["crane", "crate"]


def test_absent_letter_ignored_where_confirmed():
    # 'geese' scored against 'these': the grey 'e' is a repeat of a green one
    words = ["geese", "these", "obese", "tease"]
    st = _state(5, SolveParams(confirmed="--ese", misplaced="-----", absent="ge"))
    assert st.misplaced == ()
    assert filter_candidates(words, st, 5) == ["these", "obese"]


def test_absent_check_skipped_for_letters_reported_misplaced():
    with_round = _state(5, SolveParams(confirmed="_pp__", misplaced="a____", absent="a"))
    assert filter_absent(["apple"], with_round) == ["apple"]

    without_round = _state(5, SolveParams(confirmed="_pp__", absent="a"))
    assert filter_absent(["apple"], without_round) == []


def test_absent_exception_keeps_word_through_all_passes():
    words = ["apple", "mango"]
    st = _state(5, SolveParams(confirmed="_pp__", misplaced="-a---", absent="a"))
    assert filter_candidates(words, st, 5) == ["apple"]


def test_misplaced_letter_banned_at_its_index():
    words = ["abcde", "bacde", "cabde"]
    st = _state(5, SolveParams(misplaced="a----"))
    idx = derive_indexes(st.confirmed, 5)
    assert filter_misplaced_indexes(words, st, idx) == ["bacde", "cabde"]
    assert filter_candidates(words, st, 5) == ["bacde", "cabde"]


def test_misplaced_letter_must_appear_elsewhere():
    words = ["abcde", "fghij", "bfaxy"]
    st = _state(5, SolveParams(misplaced="-a---"))
    assert filter_misplaced_presence(words, st) == ["abcde", "bfaxy"]


def test_misplaced_on_a_settled_index_rejects_everything_there():
    words = ["abcde", "bacde"]
    st = _state(5, SolveParams(confirmed="a____"), SolveParams(misplaced="a----"))
    assert filter_candidates(words, st, 5) == []


def test_each_round_narrows_in_turn():
    words = ["abcde", "bacde", "cbade", "ebcda"]
    st = _state(5, SolveParams(misplaced="a----"), SolveParams(misplaced="----a"))
    # a is neither first nor last but still in the word
    assert filter_candidates(words, st, 5) == ["bacde", "cbade"]


def test_contradiction_yields_nothing():
    words = ["abcd", "axcd", "aycd"]
    st = _state(4, SolveParams(confirmed="ax__"), SolveParams(confirmed="ay__"))
    assert filter_candidates(words, st, 4) == []
