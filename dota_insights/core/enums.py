"""Shared enums used across features.

This module provides a single source of truth for enums used in both models and schemas.
"""

from enum import Enum


class Bracket(str, Enum):
    """Skill brackets used to segment hero meta statistics."""

    HERALD = "1"
    GUARDIAN = "2"
    CRUSADER = "3"
    ARCHON = "4"
    LEGEND = "5"
    ANCIENT = "6"
    DIVINE = "7"
    IMMORTAL = "8"
    PRO = "pro"


class MetaMetric(str, Enum):
    """Per-bracket metric carried by a hero meta stat."""

    PICK_RATE = "pick_rate"
    WIN_RATE = "win_rate"


class HeroRole(str, Enum):
    """Role tags the suggestion scorer treats as draft needs."""

    CARRY = "Carry"
    SUPPORT = "Support"
    INITIATOR = "Initiator"
    DURABLE = "Durable"
    NUKER = "Nuker"


class PatternCategory(str, Enum):
    """Category tag of a detected performance pattern."""

    TIMING = "timing"
    COMBAT = "combat"
    ROLE = "role"
    FORM = "form"
    CONTEXT = "context"


class PatternDirection(str, Enum):
    """Whether a pattern marks a strength or a weakness."""

    STRENGTH = "strength"
    WEAKNESS = "weakness"


class BuildTendency(str, Enum):
    """Overall item build tendency derived from keyword classification."""

    FARMING = "farming"
    FIGHTING = "fighting"
    BALANCED = "balanced"


class ItemGroup(str, Enum):
    """Coarse grouping of the item catalog."""

    CONSUMABLE = "consumable"
    EQUIPMENT = "equipment"
    OTHER = "other"
