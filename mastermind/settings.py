"""
Single place to:
- Read game defaults from env (MASTERMIND_PEG_COUNT, MASTERMIND_PEG_RANGE, MASTERMIND_MAX_GUESSES)
- Check them against the same bounds GameBuilder enforces
- Fall back to the classic board when nothing is set

Values are read once, at import. A bad value stops the import.
"""

import os
from typing import Annotated

from dotenv import load_dotenv
from pydantic import Field, TypeAdapter, ValidationError

# 1) Load env vars from .env if present
load_dotenv()


def _int_setting(name: str, default: int, ge: int, le: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return TypeAdapter(Annotated[int, Field(ge=ge, le=le)]).validate_python(raw.strip())
    except ValidationError:
        raise RuntimeError(
            f"{name} must be an integer between {ge} and {le}, got {raw!r}. "
            "Fix your environment or local .env."
        ) from None


# 2) Classic board: 4 pegs, 6 colors, 12 rows
DEFAULT_PEG_COUNT = _int_setting("MASTERMIND_PEG_COUNT", 4, ge=1, le=255)
DEFAULT_PEG_RANGE = _int_setting("MASTERMIND_PEG_RANGE", 6, ge=1, le=256)
DEFAULT_MAX_GUESSES = _int_setting("MASTERMIND_MAX_GUESSES", 12, ge=0, le=255)
