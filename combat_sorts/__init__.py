"""Turn-based combat rules: character classes, melee attacks and spells."""

__version__ = "0.1.0"
__all__ = ["attacks", "classes"]