"""
Ghost-text autocomplete engine.

As the user types into a single-line field, this package picks the best
candidate from two ordered lists (a preferred list checked first, then the
regular suggestions) and tells the host what to paint: the typed text
followed by the rest of the suggestion, with the typed part hidden so only
the muted completion shows behind the cursor.

The package keeps a clean separation of concerns:
- Matching (case-insensitive prefix, self-matches excluded)
- Composing the overlay text (word or sentence mode)
- A toolkit-free field controller hosts drive on every edit
- Loading candidate lists from text files

Main Functions:
    find(term, priority, fallback): pick the first qualifying candidate
    compose(term, match, mode): build the RenderDirective to paint

Example Usage:
    from ghosttext import GhostTextField

    field = GhostTextField(["hello world wide web"], mode="word")
    d = field.text_changed("hello wor")
    d.display_text    # "hello world "
    d.visible_text    # "ld "
"""

# src/ghosttext/__init__.py
from .models import MatchMode, MatchSource, MatchResult, RenderDirective
from .matcher import find, is_match, SuggestionMatcher
from .composer import compose
from .field import GhostTextField
from .loader import load_candidates, read_candidates

__version__ = "1.0.0"
__all__ = [
    "MatchMode", "MatchSource", "MatchResult", "RenderDirective",
    "find", "is_match", "SuggestionMatcher", "compose",
    "GhostTextField", "load_candidates", "read_candidates",
]
