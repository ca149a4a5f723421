# src/ghosttext/matcher.py
"""
Suggestion matching.

A candidate qualifies for a search term when both hold:
  * it is NOT case-insensitively equal to the term (nothing left to suggest)
  * it case-insensitively starts with the term

The priority list is scanned first, in order; the fallback list only when the
priority list has no qualifying candidate. The first hit wins.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from .fold import equals_folded, starts_with_folded
from .models import MatchResult, MatchSource

log = logging.getLogger(__name__)


def is_match(candidate: str, term: str) -> bool:
    if equals_folded(candidate, term):
        return False
    return starts_with_folded(candidate, term)


def first_match(candidates: Iterable[str], term: str) -> Optional[str]:
    """Return the first qualifying candidate in list order, or None."""
    for c in candidates:
        if is_match(c, term):
            return c
    return None


def find(search_term: str,
         priority: Sequence[str] = (),
         fallback: Sequence[str] = ()) -> MatchResult:
    """
    Search priority, then fallback, for the first candidate that completes
    search_term. An empty term never matches anything.
    """
    if not search_term:
        return MatchResult.not_found()

    hit = first_match(priority or (), search_term)
    if hit is not None:
        log.debug("match %r -> %r (priority)", search_term, hit)
        return MatchResult(candidate=hit, source=MatchSource.PRIORITY)

    hit = first_match(fallback or (), search_term)
    if hit is not None:
        log.debug("match %r -> %r (fallback)", search_term, hit)
        return MatchResult(candidate=hit, source=MatchSource.FALLBACK)

    log.debug("no match for %r", search_term)
    return MatchResult.not_found()


class SuggestionMatcher:
    """
    Binds the two candidate lists so a host can call find(term) per keystroke.
    Lists are copied on assignment and only read during a search.
    """

    def __init__(self,
                 priority: Optional[Iterable[str]] = None,
                 fallback: Optional[Iterable[str]] = None) -> None:
        self.priority = priority
        self.fallback = fallback

    @property
    def priority(self) -> list[str]:
        return self._priority

    @priority.setter
    def priority(self, values: Optional[Iterable[str]]) -> None:
        self._priority = list(values or [])

    @property
    def fallback(self) -> list[str]:
        return self._fallback

    @fallback.setter
    def fallback(self, values: Optional[Iterable[str]]) -> None:
        self._fallback = list(values or [])

    def find(self, search_term: str) -> MatchResult:
        return find(search_term, self._priority, self._fallback)

    def __repr__(self) -> str:
        return f"SuggestionMatcher(priority={len(self._priority)}, fallback={len(self._fallback)})"
