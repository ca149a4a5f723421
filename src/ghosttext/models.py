# src/ghosttext/models.py
"""
Data models for the ghost-text engine.

This module defines the small, focused value types that flow between the
matcher, the composer and whatever host paints the result:

- MatchMode: how much of a matched candidate is shown (one word vs. all).
- MatchSource: which list a match came from (or that it was forced).
- MatchResult: the outcome of one search; the full candidate, not the
  composed text.
- RenderDirective: the exact string to paint plus the range to hide.

These classes do not contain matching logic; they only structure the data so
that searching and composing stay pure and easy to test.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .config import DEFAULT_MODE

log = logging.getLogger(__name__)


class MatchMode(str, Enum):
    """
    WORD truncates the suggestion to as many space-separated words as the user
    has typed (finishing the last partial word). SENTENCE shows the whole
    candidate.
    """
    WORD = "word"
    SENTENCE = "sentence"

    @classmethod
    def coerce(cls, value, default: "MatchMode | str | None" = None) -> "MatchMode":
        """Accept a MatchMode or its name/value; unknown values fall back to default."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for mode in cls:
                if key == mode.value:
                    return mode
        if default is None:
            default = DEFAULT_MODE
        fallback = default if isinstance(default, cls) else cls(str(default).lower())
        log.warning("Unknown match mode %r; using %s", value, fallback.value)
        return fallback


class MatchSource(str, Enum):
    PRIORITY = "priority"
    FALLBACK = "fallback"
    FORCED = "forced"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class MatchResult:
    """
    The outcome of a single search.

    Attributes
    ----------
    candidate : Optional[str]
        The full matched candidate exactly as stored in its list (its own
        casing). None when nothing matched.
    source : MatchSource
        PRIORITY or FALLBACK for a search hit, FORCED for a suggestion set
        directly by the host, NONE when not found.
    """
    candidate: Optional[str] = None
    source: MatchSource = MatchSource.NONE

    @property
    def found(self) -> bool:
        return self.source is not MatchSource.NONE and bool(self.candidate)

    @classmethod
    def not_found(cls) -> "MatchResult":
        return cls()

    @classmethod
    def forced(cls, value: Optional[str]) -> "MatchResult":
        if not value:
            return cls()
        return cls(candidate=value, source=MatchSource.FORCED)


@dataclass(frozen=True, slots=True)
class RenderDirective:
    """
    What the host should paint over the input field.

    Attributes
    ----------
    display_text : str
        The full overlay string. Always starts with the typed text verbatim.
    hidden_range : Tuple[int, int]
        (start, length) of the characters to paint transparent. start is
        always 0; length is the typed text's character count, or 0 for the
        empty directive.
    """
    display_text: str = ""
    hidden_range: Tuple[int, int] = (0, 0)

    @classmethod
    def empty(cls) -> "RenderDirective":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.display_text

    @property
    def hidden_text(self) -> str:
        start, length = self.hidden_range
        return self.display_text[start:start + length]

    @property
    def visible_text(self) -> str:
        start, length = self.hidden_range
        return self.display_text[start + length:]

    def to_dict(self) -> dict:
        return {
            "display_text": self.display_text,
            "hidden_range": list(self.hidden_range),
            "visible_text": self.visible_text,
        }
