from __future__ import annotations

import logging
from typing import List

from .config import TOKEN_SEPARATOR
from .models import MatchMode, MatchResult, RenderDirective

log = logging.getLogger(__name__)


def _word_tokens(term: str, full: str) -> str:
    """
    Keep as many words of `full` as `term` has, each followed by one separator
    (the last one included). Never reads past the words `full` actually has.
    """
    n = len(term.split(TOKEN_SEPARATOR))
    words: List[str] = full.split(TOKEN_SEPARATOR)
    out = ""
    for w in words[:n]:
        out = out + w + TOKEN_SEPARATOR
    return out


def compose(search_term: str,
            match: MatchResult,
            mode: MatchMode | str = MatchMode.WORD) -> RenderDirective:
    """
    Build the overlay for `search_term` given a match.

    The typed text is always the literal prefix of the result; only the part
    of the candidate past len(search_term) is taken from the candidate, so
    the user's casing is preserved.
    """
    if not match.found:
        return RenderDirective.empty()

    candidate = match.candidate or ""
    remainder = candidate[len(search_term):]
    full = search_term + remainder

    if MatchMode.coerce(mode) is MatchMode.WORD:
        text = _word_tokens(search_term, full)
    else:
        text = full

    log.debug("compose %r via %s -> %r", search_term, match.source.value, text)
    return RenderDirective(display_text=text, hidden_range=(0, len(search_term)))
