from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """Unit-cost edit distance (insert, delete, substitute) between two strings."""
    return Levenshtein.distance(a, b)
