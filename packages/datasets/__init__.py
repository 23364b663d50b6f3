from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines, load_dictionary
from .accents import normalize_accents, DualDictionary

__all__ = ["validate_dictionary", "pretty_summary", "read_lines", "write_lines",
           "load_dictionary", "normalize_accents", "DualDictionary"]
