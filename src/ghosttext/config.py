from __future__ import annotations
import os

# default match mode: "word" (finish the current word) or "sentence" (whole candidate)
DEFAULT_MODE: str = "word"

# suggestion color: black at alpha 0.22, the same tone as a default placeholder
COMPLETION_COLOR: str = "#00000038"

# horizontal padding of the overlay; bordered fields need some room
DEFAULT_PADDING: int = 0
BORDERED_PADDING: int = 8

# move the overlay up or down when the host's baseline is slightly off
PIXEL_CORRECTION: int = 0

# words are split on a single space, never on other whitespace
TOKEN_SEPARATOR: str = " "

# candidate files picked up when a directory is given
CANDIDATE_EXTS = [".txt"]
CANDIDATE_ENCODING: str = "utf-8"

# progress logging (set GHOSTTEXT_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("GHOSTTEXT_VERBOSE") == "1"
