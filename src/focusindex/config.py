from __future__ import annotations

# paths are split on this single separator; no other normalization
PATH_SEPARATOR: str = "/"

# "{index}{INDEX_SEPARATOR}{label}"
INDEX_SEPARATOR: str = ": "

# direct digit jumps only while fewer than this many items are open
DIGIT_JUMP_LIMIT: int = 10

PLACEHOLDER: str = "Pick editor by index"
SELECTION_ERROR_MESSAGE: str = "An error occurred selecting the tab. Please try again later."

# path list files: lines starting with this are ignored
COMMENT_PREFIX: str = "#"

# set FOCUSINDEX_VERBOSE=1 (or pass --verbose) for progress logging
VERBOSE_ENV: str = "FOCUSINDEX_VERBOSE"
