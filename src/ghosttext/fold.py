from __future__ import annotations


def fold(text: str) -> str:
    """Case-fold for comparison only; the displayed text keeps its own casing."""
    return text.casefold()


def equals_folded(candidate: str, term: str) -> bool:
    return fold(candidate) == fold(term)


def starts_with_folded(candidate: str, term: str) -> bool:
    # fold only the slice compose() hides; folding may change lengths (ß -> ss)
    if len(candidate) < len(term):
        return False
    return fold(candidate[:len(term)]) == fold(term)
