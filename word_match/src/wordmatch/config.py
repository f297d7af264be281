# wordmatch/config.py
from __future__ import annotations

# ord('a') - 1, so that a/A scores 1 and z/Z scores 26
ASCII_OFFSET: int = 96

# Lexical scan stops at the first candidate within this edit distance
MIN_DISTANCE: int = 1

# /* ~~~ server defaults (overridable from the command line) ~~~ */
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8080
PORT_ENV_VAR: str = "PORT"

# None -> system entropy; set an int for reproducible random picks
RANDOM_SEED: int | None = None
