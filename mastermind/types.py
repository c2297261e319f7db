"""
Labels for clarity.
"""

from typing import Annotated, List, Literal, Tuple

from pydantic import Field

PegValue = Annotated[int, Field(ge=0, le=255)]  # 0 -> 255
Pegs = List[PegValue]  # secret or guess, one value per slot
Score = Tuple[int, int]  # (hits, near_hits)
GameStatus = Literal["active", "exhausted"]
