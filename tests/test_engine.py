import pytest
from packages.engine import (
    score, feedback_from_pattern, is_solved, validate_guess, dictionary_issues, SolveParams,
)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","-GYYY"),
    ("level","level","GGGGG"),
    ("lemon","level","GG---"),
    ("cools","scoop","YYG-Y"),
    ("crane","crane","GGGGG"),
    ("raise","crane","YY--G"),
    ("stare","crane","--GYG"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","-GGGYY"),
    ("planet","palate","GYY-YY"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected

def test_feedback_from_pattern_splits_cells():
    fb = feedback_from_pattern("raise", "YY--G")
    assert fb == SolveParams(confirmed="----e", misplaced="ra---", absent="is")

def test_feedback_from_pattern_all_gray():
    fb = feedback_from_pattern("BLIMP", "-----")
    assert fb.confirmed == "-----" and fb.misplaced == "-----" and fb.absent == "blimp"

def test_feedback_from_pattern_length_mismatch():
    with pytest.raises(ValueError):
        feedback_from_pattern("raise", "YY-")

def test_is_solved():
    assert is_solved("GGGGG") and not is_solved("GGGG-") and not is_solved("")

def test_validate_guess_n5():
    allowed = ["crane","raise","stare"]
    assert validate_guess("CRANE", allowed, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False

def test_dictionary_issues():
    assert dictionary_issues(["crane", "stare"]) == []
    assert dictionary_issues([]) == ["dictionary is empty"]
    issues = dictionary_issues(["crane", "cranes", "cr4ne"])
    assert any("length 5" in msg for msg in issues)
    assert any("non-letters" in msg for msg in issues)
