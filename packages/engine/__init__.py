from .feedback import SolveParams, EMPTY_MARKERS
from .state import EngineState, CONTRADICTION, ingest, derive_indexes
from .constraints import filter_candidates
from .solver import ConstraintEngine, POISON_CHAR
from .scoring import score, feedback_from_pattern, is_solved
from .validation import dictionary_issues, validate_guess

__all__ = [
    "ConstraintEngine", "SolveParams", "EngineState", "CONTRADICTION", "POISON_CHAR",
    "EMPTY_MARKERS", "ingest", "derive_indexes", "filter_candidates",
    "score", "feedback_from_pattern", "is_solved", "dictionary_issues", "validate_guess",
]
