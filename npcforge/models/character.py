"""Character sheet models.

These models mirror the JSON schema template embedded in the generation
prompt. Both must change together.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class AbilityScores(BaseModel):
    """The six ability scores."""

    model_config = ConfigDict(frozen=True)

    strength: StrictInt = Field(ge=0, description="Strength score")
    dexterity: StrictInt = Field(ge=0, description="Dexterity score")
    constitution: StrictInt = Field(ge=0, description="Constitution score")
    intelligence: StrictInt = Field(ge=0, description="Intelligence score")
    wisdom: StrictInt = Field(ge=0, description="Wisdom score")
    charisma: StrictInt = Field(ge=0, description="Charisma score")


class HitPoints(BaseModel):
    """Hit point block."""

    model_config = ConfigDict(frozen=True)

    max: StrictInt = Field(ge=0, description="Maximum hit points")
    current: StrictInt = Field(ge=0, description="Current hit points")
    temporary: StrictInt = Field(ge=0, description="Temporary hit points")
    hit_dice: StrictStr = Field(description="Hit dice, e.g. '10d8'")


class Skill(BaseModel):
    """A skill and its modifier."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    modifier: StrictInt
    proficient: StrictBool


class Attack(BaseModel):
    """A weapon or spell attack."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    attack_bonus: StrictInt
    damage: StrictStr = Field(description="Damage dice expression, e.g. '1d8+3'")
    damage_type: StrictStr
    range: Optional[StrictStr] = Field(default=None, description="'Melee' or a range in feet")
    properties: list[StrictStr] = Field(default_factory=list, description="Weapon property tags")


class SpellSlots(BaseModel):
    """Spell slots per spell level."""

    model_config = ConfigDict(frozen=True)

    level_1: StrictInt = Field(default=0, ge=0)
    level_2: StrictInt = Field(default=0, ge=0)
    level_3: StrictInt = Field(default=0, ge=0)
    level_4: StrictInt = Field(default=0, ge=0)
    level_5: StrictInt = Field(default=0, ge=0)
    level_6: StrictInt = Field(default=0, ge=0)
    level_7: StrictInt = Field(default=0, ge=0)
    level_8: StrictInt = Field(default=0, ge=0)
    level_9: StrictInt = Field(default=0, ge=0)


class SpellsByLevel(BaseModel):
    """Known spell names, grouped by spell level."""

    model_config = ConfigDict(frozen=True)

    cantrips: list[StrictStr] = Field(default_factory=list)
    level_1: list[StrictStr] = Field(default_factory=list)
    level_2: list[StrictStr] = Field(default_factory=list)
    level_3: list[StrictStr] = Field(default_factory=list)
    level_4: list[StrictStr] = Field(default_factory=list)
    level_5: list[StrictStr] = Field(default_factory=list)
    level_6: list[StrictStr] = Field(default_factory=list)
    level_7: list[StrictStr] = Field(default_factory=list)
    level_8: list[StrictStr] = Field(default_factory=list)
    level_9: list[StrictStr] = Field(default_factory=list)


class Spellcasting(BaseModel):
    """Spellcasting block for casters."""

    model_config = ConfigDict(frozen=True)

    spellcasting_ability: StrictStr
    spell_save_dc: StrictInt = Field(ge=0)
    spell_attack_bonus: StrictInt
    spell_slots: Optional[SpellSlots] = None
    spells_known: SpellsByLevel


class Treasure(BaseModel):
    """Coin and valuables carried."""

    model_config = ConfigDict(frozen=True)

    gold: StrictInt = Field(default=0, ge=0, description="Gold pieces")
    items: list[StrictStr] = Field(default_factory=list)


class Equipment(BaseModel):
    """Carried equipment."""

    model_config = ConfigDict(frozen=True)

    armor: list[StrictStr] = Field(default_factory=list)
    weapons: list[StrictStr] = Field(default_factory=list)
    gear: list[StrictStr] = Field(default_factory=list)
    treasure: Treasure


class Personality(BaseModel):
    """Traits, ideals, bonds and flaws."""

    model_config = ConfigDict(frozen=True)

    traits: list[StrictStr] = Field(default_factory=list)
    ideals: StrictStr
    bonds: StrictStr
    flaws: StrictStr


class Appearance(BaseModel):
    """Physical description."""

    model_config = ConfigDict(frozen=True)

    age: StrictInt = Field(ge=0)
    height: StrictStr
    weight: StrictStr
    eyes: StrictStr
    hair: StrictStr
    skin: StrictStr
    distinguishing_features: list[StrictStr] = Field(default_factory=list)


class Feature(BaseModel):
    """A named class, race or background feature."""

    model_config = ConfigDict(frozen=True)

    name: StrictStr
    description: StrictStr


class CharacterRecord(BaseModel):
    """Complete generated character sheet."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Identity
    name: StrictStr = Field(description="Full character name")
    race: StrictStr
    class_name: StrictStr = Field(alias="class", description="Class, or classes for a multiclass character")
    subclass: Optional[StrictStr] = None
    level: StrictInt = Field(ge=0, description="Total character level")
    background: StrictStr
    alignment: StrictStr

    ability_scores: AbilityScores

    # Combat stats
    hit_points: HitPoints
    armor_class: StrictInt = Field(ge=0)
    initiative: StrictInt
    speed: StrictInt = Field(ge=0)
    proficiency_bonus: StrictInt

    # Skills and proficiencies
    skills: list[Skill] = Field(default_factory=list)
    saving_throws: list[StrictStr] = Field(default_factory=list)
    languages: list[StrictStr] = Field(default_factory=list)
    tool_proficiencies: list[StrictStr] = Field(default_factory=list)

    # Combat abilities
    attacks: list[Attack] = Field(default_factory=list)
    spells: Optional[Spellcasting] = None

    equipment: Equipment

    # Character details
    personality: Personality
    backstory: StrictStr
    appearance: Appearance

    features: list[Feature] = Field(default_factory=list)

    def to_json(self) -> str:
        """Pretty-printed JSON using the wire field names."""
        return self.model_dump_json(by_alias=True, indent=2)
