# ghosttext/field.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from . import config as CFG
from .composer import compose
from .matcher import SuggestionMatcher
from .models import MatchMode, MatchResult, RenderDirective

log = logging.getLogger(__name__)

Listener = Callable[[RenderDirective], None]


class GhostTextField:
    """
    Toolkit-free state for one single-line input with inline suggestions.

    The host calls text_changed(text) on every edit (or assigns .text) and
    paints the returned RenderDirective. Listeners registered with
    subscribe() get the same directive, for hosts that prefer callbacks.

    Public API (used by the CLI, Flask and desktop hosts):
      * text_changed(text):      match + compose, returns the directive
      * force_suggestion(value): bypass matching with a fixed suggestion
      * current_suggestion():    the full candidate being suggested, or None
      * accept():                commit the shown suggestion as the text
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        suggestions: Optional[Iterable[str]] = None,
        *,
        preferred: Optional[Iterable[str]] = None,
        mode: MatchMode | str = CFG.DEFAULT_MODE,
        completion_color: str = CFG.COMPLETION_COLOR,
        padding: Optional[int] = None,
        bordered: bool = False,
        pixel_correction: int = CFG.PIXEL_CORRECTION,
    ) -> None:
        self._matcher = SuggestionMatcher(priority=preferred, fallback=suggestions)
        self.mode = mode
        self.completion_color = completion_color
        self.bordered = bordered
        self._padding = padding
        self.pixel_correction = pixel_correction

        self._text = ""
        self._match = MatchResult.not_found()
        self._directive = RenderDirective.empty()
        self._listeners: List[Listener] = []

    # ------------- configuration -------------

    @property
    def suggestions(self) -> list[str]:
        return self._matcher.fallback

    @suggestions.setter
    def suggestions(self, values: Optional[Iterable[str]]) -> None:
        self._matcher.fallback = values

    @property
    def preferred(self) -> list[str]:
        return self._matcher.priority

    @preferred.setter
    def preferred(self, values: Optional[Iterable[str]]) -> None:
        self._matcher.priority = values

    @property
    def mode(self) -> MatchMode:
        return self._mode

    @mode.setter
    def mode(self, value: MatchMode | str) -> None:
        self._mode = MatchMode.coerce(value)

    @property
    def padding(self) -> int:
        if self._padding is not None:
            return self._padding
        return CFG.BORDERED_PADDING if self.bordered else CFG.DEFAULT_PADDING

    @padding.setter
    def padding(self, value: Optional[int]) -> None:
        self._padding = value

    # ------------- state -------------

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self.text_changed(value or "")

    @property
    def match(self) -> MatchResult:
        return self._match

    @property
    def directive(self) -> RenderDirective:
        return self._directive

    def current_suggestion(self) -> Optional[str]:
        return self._match.candidate if self._match.found else None

    # ------------- events -------------

    def text_changed(self, text: str) -> RenderDirective:
        """Recompute the suggestion for the new text from scratch."""
        self._text = text
        return self._publish(self._matcher.find(text))

    def force_suggestion(self, value: Optional[str]) -> RenderDirective:
        """Show `value` as the suggestion without searching; None/"" clears it."""
        return self._publish(MatchResult.forced(value))

    def refresh(self) -> RenderDirective:
        """Re-compose the current match, e.g. after the mode changed."""
        return self._publish(self._match)

    def accept(self) -> str:
        """
        Replace the text with what is currently displayed and search again.
        Returns the (possibly unchanged) text.
        """
        if self._directive.is_empty:
            return self._text
        accepted = self._directive.display_text
        log.info("Accepted suggestion %r", accepted)
        self.text_changed(accepted)
        return accepted

    # ------------- listeners -------------

    def subscribe(self, callback: Listener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------- internals -------------

    def _publish(self, match: MatchResult) -> RenderDirective:
        self._match = match
        self._directive = compose(self._text, match, self._mode)
        for cb in list(self._listeners):
            try:
                cb(self._directive)
            except Exception:
                log.exception("Suggestion listener %r failed", cb)
        return self._directive

    def __repr__(self) -> str:
        return (f"GhostTextField(text={self._text!r}, mode={self._mode.value}, "
                f"suggestion={self.current_suggestion()!r}, source={self._match.source.value})")

