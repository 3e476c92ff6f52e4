"""Owner label normalization and fuzzy matching for scanned square names."""

from typing import Iterable

from .constants import FUZZY_MATCH_THRESHOLD, OCR_SUBSTITUTIONS


def normalize_owner_name(name: str) -> str:
    """
    Normalize a square's name or an owner label for comparison.

    Trims, lowercases, removes all whitespace, then replaces characters OCR
    commonly confuses with letters (0 -> o, 1 -> l, 5 -> s).

    Examples:
        "Mike" -> "mike"
        " M i k e " -> "mike"
        "J0HN 5MITH" -> "johnsmith"
    """
    collapsed = ''.join(name.strip().lower().split())
    return ''.join(OCR_SUBSTITUTIONS.get(ch, ch) for ch in collapsed)


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance (insert/delete/substitute cost 1), one rolling row."""
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ch_a in enumerate(a, 1):
        current = [i]
        for j, ch_b in enumerate(b, 1):
            current.append(min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (ch_a != ch_b),  # substitution
            ))
        previous = current
    return previous[-1]


def similarity(normalized_a: str, normalized_b: str) -> float:
    """1 - distance / longer length, on already-normalized strings."""
    if not normalized_a or not normalized_b:
        return 0.0
    longest = max(len(normalized_a), len(normalized_b))
    return 1.0 - edit_distance(normalized_a, normalized_b) / longest


def name_similarity(a: str, b: str) -> float:
    """Similarity of two raw names after normalization (0.0 - 1.0)."""
    return similarity(normalize_owner_name(a), normalize_owner_name(b))


def matches_owner(cell_text: str, owner_labels: Iterable[str]) -> bool:
    """
    Whether a square's text belongs to any of the owner's labels.

    An exact normalized match against any label wins outright; fuzzy
    matching is only tried when none of the labels match exactly.
    Empty text or labels never match.
    """
    cell = normalize_owner_name(cell_text)
    if not cell:
        return False

    keys = [k for k in (normalize_owner_name(label) for label in owner_labels) if k]
    if cell in keys:
        return True
    return any(similarity(cell, key) >= FUZZY_MATCH_THRESHOLD for key in keys)
