"""
Game variants.
Classic is the standard board. Advanced is reserved and not implemented yet.
"""

from enum import Enum

from .builder import GameBuilder
from .errors import UnsupportedVariant


class Variant(str, Enum):
    CLASSIC = "classic"
    ADVANCED = "advanced"

    @classmethod
    def default(cls) -> "Variant":
        return cls.CLASSIC


def builder_for(variant: Variant) -> GameBuilder:
    """Preset builder for a variant; accepts the enum or its string value."""
    try:
        variant = Variant(variant)
    except ValueError:
        raise UnsupportedVariant(variant) from None

    if variant is Variant.CLASSIC:
        return GameBuilder()
    raise UnsupportedVariant(variant)
