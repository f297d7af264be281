from __future__ import annotations
import re
from typing import Any

# Letters only, at least one. The engine assumes this and never checks.
_WORD = re.compile(r"[A-Za-z]+")


def is_valid_word(text: Any) -> bool:
    """True if text is a non-empty str of ASCII letters and nothing else."""
    return isinstance(text, str) and _WORD.fullmatch(text) is not None
