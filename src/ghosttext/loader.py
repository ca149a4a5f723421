from __future__ import annotations
import logging
import os
from typing import Iterable, List

from .config import CANDIDATE_ENCODING, CANDIDATE_EXTS

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 100


def _iter_candidate_files(root: str) -> Iterable[str]:
    """Yield candidate files under root, recursively, in a stable sorted order."""
    exts = tuple(e.lower() for e in CANDIDATE_EXTS)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for fn in sorted(filenames):
            if fn.lower().endswith(exts):
                yield os.path.join(dirpath, fn)


def read_candidates(path: str) -> List[str]:
    """
    One candidate per line, in file order. Line endings are stripped, blank
    lines skipped, duplicates kept (the first occurrence wins at match time).
    """
    with open(path, "r", encoding=CANDIDATE_ENCODING, errors="ignore") as f:
        return [ln.rstrip("\r\n") for ln in f if ln.strip()]


def load_candidates(paths: Iterable[str]) -> List[str]:
    """
    Concatenate candidates from files and/or directories, in argument order.
    Directories are scanned for CANDIDATE_EXTS files.
    """
    out: List[str] = []
    file_count = 0
    for p in paths:
        if os.path.isdir(p):
            files = list(_iter_candidate_files(p))
        elif os.path.isfile(p):
            files = [p]
        else:
            raise FileNotFoundError(p)

        for path in files:
            items = read_candidates(path)
            out.extend(items)
            file_count += 1
            log.debug("read %d candidates from %s", len(items), path)
            if file_count % PROGRESS_EVERY_FILES == 0:
                log.info("[scanned] files=%d candidates=%d", file_count, len(out))

    log.info("Loaded %d candidates from %d file(s)", len(out), file_count)
    return out
