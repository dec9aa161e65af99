"""Data models module for NPCForge."""

# Character sheet
from npcforge.models.character import (
    AbilityScores,
    Appearance,
    Attack,
    CharacterRecord,
    Equipment,
    Feature,
    HitPoints,
    Personality,
    Skill,
    Spellcasting,
    SpellsByLevel,
    SpellSlots,
    Treasure,
)

# Constraints
from npcforge.models.constraints import GenerationConstraints, RoleMode

__all__ = [
    # Character sheet
    "CharacterRecord",
    "AbilityScores",
    "HitPoints",
    "Skill",
    "Attack",
    "Spellcasting",
    "SpellSlots",
    "SpellsByLevel",
    "Equipment",
    "Treasure",
    "Personality",
    "Appearance",
    "Feature",
    # Constraints
    "GenerationConstraints",
    "RoleMode",
]
