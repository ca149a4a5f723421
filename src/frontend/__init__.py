"""Public API for the ghost-text hosts (CLI, Flask)."""
from __future__ import annotations
import logging
import time
from typing import Iterable, Optional

from ghosttext import GhostTextField, MatchMode, MatchResult, RenderDirective, compose, find, load_candidates
from ghosttext import config as CFG

log = logging.getLogger(__name__)

_field: GhostTextField | None = None


class NotInitializedError(RuntimeError):
    """Raised when a host asks for suggestions before initialize()."""


def initialize(candidates: Iterable[str] = (),
               priority: Iterable[str] = (),
               mode: MatchMode | str | None = None,
               verbose: bool = False) -> GhostTextField:
    """
    Load the candidate lists from files/folders and set up the shared field.
      candidates: paths for the regular suggestion list
      priority:   paths for the preferred list (checked first)
    """
    global _field
    if verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)
    t0 = time.perf_counter()

    fallback = load_candidates(list(candidates))
    preferred = load_candidates(list(priority))
    _field = GhostTextField(fallback, preferred=preferred, mode=mode or CFG.DEFAULT_MODE)

    log.info("[ready] %d preferred + %d suggestions in %.2fs",
             len(preferred), len(fallback), time.perf_counter() - t0)
    return _field


def attach(field: Optional[GhostTextField]) -> None:
    """Use an already-built field (tests, embedding)."""
    global _field
    _field = field


def ready() -> bool:
    return _field is not None


def field() -> GhostTextField:
    if _field is None:
        raise NotInitializedError("Suggestions not initialized. Call initialize(...) first.")
    return _field


def suggest(query: str, mode: MatchMode | str | None = None) -> tuple[MatchResult, RenderDirective]:
    """Look query up against the shared lists without touching the field's text or last match."""
    f = field()
    match = find(query, f.preferred, f.suggestions)
    return match, compose(query, match, f.mode if mode is None else mode)


def payload(query: str, mode: MatchMode | str | None = None) -> dict:
    """suggest() as a JSON-ready dict."""
    match, d = suggest(query, mode)
    out = d.to_dict()
    out["candidate"] = match.candidate
    out["source"] = match.source.value
    out["mode"] = MatchMode.coerce(field().mode if mode is None else mode).value
    return out
