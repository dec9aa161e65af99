"""Builds the character generation prompt using LangChain templates."""

from typing import Optional

from langchain_core.prompts import PromptTemplate

from npcforge.config import DEFAULT_ROLE, MAX_LEVEL, MIN_LEVEL
from npcforge.models.constraints import GenerationConstraints, RoleMode

PREAMBLE = (
    "You are a D&D 2024 character generator. Generate a complete, TRULY RANDOM D&D character "
    "with maximum variety and creativity.\n\n"
)

VARIETY_GUIDANCE = """IMPORTANT: Be EXTREMELY VARIED in your choices! Avoid patterns and defaults!
- DO NOT default to elves, wizards, or common combinations
- Mix unusual race/class combinations (Dragonborn Bard, Half-Orc Wizard, Tiefling Paladin, etc.)
- Vary genders, alignments, backgrounds, and personality types significantly
- Create diverse and unique characters each time

Requirements:
"""

RANDOM_RACE_LINE = (
    "- Choose a COMPLETELY RANDOM race from ALL official D&D races (Human, Elf, Dwarf, Halfling, "
    "Dragonborn, Gnome, Half-Elf, Half-Orc, Tiefling, Aasimar, Firbolg, Goliath, Kenku, Tabaxi, "
    "Triton, Genasi, Bugbear, Goblin, Hobgoblin, Kobold, Orc, Yuan-ti, Lizardfolk, etc.)\n"
)

RANDOM_CLASS_LINE = (
    "- Choose a COMPLETELY RANDOM class from ALL official D&D classes (Barbarian, Bard, Cleric, "
    "Druid, Fighter, Monk, Paladin, Ranger, Rogue, Sorcerer, Warlock, Wizard, Artificer) and "
    "appropriate subclass\n"
)

RANDOM_ALIGNMENT_LINE = (
    "- Choose a RANDOM alignment (Lawful Good, Neutral Good, Chaotic Good, Lawful Neutral, "
    "True Neutral, Chaotic Neutral, Lawful Evil, Neutral Evil, Chaotic Evil)\n"
)

DEFAULT_ROLE_LINE = (
    f"- The character is a {DEFAULT_ROLE}: a sword-for-hire who sells their skills to whoever "
    "pays. Let this shape their skills, equipment, and backstory\n"
)

RANDOM_ROLE_LINE = (
    "- Choose a RANDOM role or occupation for the character (Merchant, Guard Captain, Cultist, "
    "Innkeeper, Bounty Hunter, Scholar, Smuggler, Priest, Noble Heir, Sailor, etc.) and let it "
    "shape their skills, equipment, and backstory\n"
)

GENERAL_REQUIREMENTS = """- Choose a RANDOM background (Acolyte, Charlatan, Criminal, Entertainer, Folk Hero, Guild Artisan, Hermit, Noble, Outlander, Sage, Sailor, Soldier, Urchin, etc.)
- Generate appropriate ability scores (use standard array or point buy)
- Calculate all derived stats correctly (AC, HP, initiative, proficiency bonus, etc.)
- Include all relevant skills, proficiencies, and saving throws
- For spellcasters, include appropriate spells based on class and level
- Include attacks and combat abilities
- Generate realistic equipment based on class and level
- Create a DETAILED and COMPREHENSIVE backstory (3-5 paragraphs) that includes:
  * Childhood: Family, upbringing, early life experiences
  * Education: Training, mentors, how they learned their skills
  * Life events: Major events, adventures, tragedies, triumphs
  * Relationships: Important people (family, friends, rivals, mentors, lovers)
  * Personality: Likes, dislikes, hobbies, quirks
  * Current situation: What brought them to where they are now in life
- Include personality traits, ideals, bonds, and flaws
- Create a vivid physical appearance

"""

# Must stay in step with npcforge.models.character.CharacterRecord
SCHEMA_EXAMPLE = r'''{
  "name": "Full character name",
  "race": "Character race",
  "class": "Character class",
  "subclass": "Character subclass or null",
  "level": 10,
  "background": "Background name",
  "alignment": "Alignment",
  "ability_scores": {
    "strength": 10,
    "dexterity": 14,
    "constitution": 12,
    "intelligence": 16,
    "wisdom": 13,
    "charisma": 8
  },
  "hit_points": {
    "max": 65,
    "current": 65,
    "temporary": 0,
    "hit_dice": "10d8"
  },
  "armor_class": 15,
  "initiative": 2,
  "speed": 30,
  "proficiency_bonus": 4,
  "skills": [
    {"name": "Arcana", "modifier": 7, "proficient": true},
    {"name": "Investigation", "modifier": 7, "proficient": true}
  ],
  "saving_throws": ["Intelligence", "Wisdom"],
  "languages": ["Common", "Elvish"],
  "tool_proficiencies": ["Alchemist's Supplies"],
  "attacks": [
    {
      "name": "Quarterstaff",
      "attack_bonus": 4,
      "damage": "1d6+0",
      "damage_type": "bludgeoning",
      "range": "Melee",
      "properties": ["Versatile"]
    }
  ],
  "spells": {
    "spellcasting_ability": "Intelligence",
    "spell_save_dc": 15,
    "spell_attack_bonus": 7,
    "spell_slots": {
      "level_1": 4,
      "level_2": 3,
      "level_3": 3,
      "level_4": 3,
      "level_5": 2,
      "level_6": 0,
      "level_7": 0,
      "level_8": 0,
      "level_9": 0
    },
    "spells_known": {
      "cantrips": ["Fire Bolt", "Mage Hand", "Prestidigitation"],
      "level_1": ["Magic Missile", "Shield", "Detect Magic"],
      "level_2": ["Misty Step", "Scorching Ray"],
      "level_3": ["Fireball", "Counterspell"],
      "level_4": ["Greater Invisibility"],
      "level_5": ["Wall of Force"],
      "level_6": [],
      "level_7": [],
      "level_8": [],
      "level_9": []
    }
  },
  "equipment": {
    "armor": ["Studded Leather Armor"],
    "weapons": ["Quarterstaff", "Dagger"],
    "gear": ["Spellbook", "Component Pouch", "Backpack", "Bedroll", "Rations"],
    "treasure": {
      "gold": 250,
      "items": ["Potion of Healing", "Spell Scroll (Identify)"]
    }
  },
  "personality": {
    "traits": ["Curious about everything", "Speaks in elaborate metaphors"],
    "ideals": "Knowledge is the path to power and domination",
    "bonds": "I seek to preserve ancient magical texts",
    "flaws": "I am easily distracted by the promise of new knowledge"
  },
  "backstory": "A comprehensive backstory covering childhood (family, upbringing, formative experiences), education (training, mentors, how they developed their skills), major life events (adventures, tragedies, triumphs), important relationships (family, friends, rivals, mentors, romantic interests), personality details (likes, dislikes, hobbies, quirks), and their current situation (what brought them to where they are now). This should be 3-5 detailed paragraphs that paint a vivid picture of their entire life journey.",
  "appearance": {
    "age": 127,
    "height": "5'8\"",
    "weight": "140 lbs",
    "eyes": "Amber",
    "hair": "Silver",
    "skin": "Pale",
    "distinguishing_features": ["Arcane tattoos on arms", "Singed eyebrows"]
  },
  "features": [
    {
      "name": "Arcane Recovery",
      "description": "Once per day during a short rest, you can recover expended spell slots..."
    }
  ]
}'''

SCHEMA_SECTION = (
    "Output ONLY valid JSON matching this exact structure (no additional text):\n\n"
    f"{SCHEMA_EXAMPLE}\n\n"
    "Generate a completely random character now:"
)

# Sections are substituted as values, so braces inside them are never parsed
GENERATION_TEMPLATE = "{preamble}{constraints}{variety}{requirements}{schema}"


class PromptBuilder:
    """Builds character generation prompts using LangChain templates."""

    def __init__(self, template: Optional[PromptTemplate] = None) -> None:
        """Initialize prompt builder."""
        self.template = template or self.create_simple_prompt(GENERATION_TEMPLATE)

    @staticmethod
    def create_simple_prompt(template: str) -> PromptTemplate:
        """Create a simple prompt template (for non-chat models)."""
        return PromptTemplate.from_template(template)

    def build_prompt(self, constraints: GenerationConstraints) -> str:
        """
        Build the full generation prompt.
        Identical constraints always produce an identical prompt.
        """
        return self.template.format(
            preamble=PREAMBLE,
            constraints=self.constraints_section(constraints),
            variety=VARIETY_GUIDANCE,
            requirements=self.requirements_section(constraints),
            schema=SCHEMA_SECTION,
        )

    @staticmethod
    def constraints_section(constraints: GenerationConstraints) -> str:
        """Mandatory directives for every supplied constraint, or empty."""
        if not constraints.has_constraints:
            return ""

        lines = ["USER CONSTRAINTS (MUST follow these exactly):"]
        if constraints.name:
            lines.append(f"- Name MUST be: {constraints.name}")
        if constraints.race:
            lines.append(f"- Race MUST be: {constraints.race}")

        if constraints.is_multiclass:
            lines.append(f"- Classes MUST be (multiclass): {' / '.join(constraints.classes)}")
            if constraints.level_distribution:
                lines.append(f"- Class levels MUST be: {_distribution_text(constraints)}")
                lines.append(f"- Total character level: {constraints.total_level}")
        elif constraints.classes:
            lines.append(f"- Class MUST be: {constraints.classes[0]}")

        if not (constraints.is_multiclass and constraints.level_distribution):
            if constraints.total_level is not None:
                lines.append(f"- Level MUST be: {constraints.total_level}")
            elif constraints.has_custom_level_range:
                low, high = constraints.level_range
                lines.append(f"- Level MUST be between {low} and {high}")

        if constraints.alignment:
            lines.append(f"- Alignment MUST be: {constraints.alignment}")

        if constraints.role_mode is RoleMode.EXPLICIT:
            lines.append(f"- Role MUST be: {constraints.role}")
        elif constraints.role_mode is RoleMode.RANDOM:
            lines.append("- Role: choose any role or occupation freely")

        return "\n".join(lines) + "\n\n"

    @staticmethod
    def requirements_section(constraints: GenerationConstraints) -> str:
        """Per-field generation guidance followed by the fixed requirements."""
        parts = []

        # Race
        if constraints.race:
            parts.append(f"- Use the specified race: {constraints.race}\n")
        else:
            parts.append(RANDOM_RACE_LINE)

        # Class
        if constraints.is_multiclass:
            parts.append(
                f"- This is a MULTICLASS character with these classes: "
                f"{' / '.join(constraints.classes)}. Choose an appropriate subclass for each "
                "class where its level allows one\n"
            )
            parts.append(
                '- Set "class" to every class with its level (e.g. "Fighter 3 / Wizard 5"), '
                'list the subclasses in "subclass", and set "level" to the TOTAL character level\n'
            )
            if constraints.level_distribution:
                parts.append(
                    f"- Use EXACTLY this level distribution: {_distribution_text(constraints)} "
                    f"(Total character level: {constraints.total_level})\n"
                )
            elif constraints.level is not None:
                parts.append(
                    f"- Split the total level of {constraints.level} across the classes "
                    "(every class needs at least 1 level)\n"
                )
            else:
                parts.append(
                    "- Choose how to split the total level across the classes "
                    "(every class needs at least 1 level)\n"
                )
        elif constraints.classes:
            parts.append(
                f"- Use the specified class: {constraints.classes[0]} and choose an appropriate subclass\n"
            )
        else:
            parts.append(RANDOM_CLASS_LINE)

        # Level
        if not (constraints.is_multiclass and constraints.level_distribution):
            if constraints.total_level is not None:
                parts.append(f"- Use the specified level: {constraints.total_level}\n")
            elif constraints.has_custom_level_range:
                low, high = constraints.level_range
                parts.append(f"- Choose a random level between {low}-{high}\n")
            else:
                parts.append(f"- Choose a random level between {MIN_LEVEL}-{MAX_LEVEL}\n")

        # Alignment
        if constraints.alignment:
            parts.append(f"- Use the specified alignment: {constraints.alignment}\n")
        else:
            parts.append(RANDOM_ALIGNMENT_LINE)

        # Role
        if constraints.role_mode is RoleMode.EXPLICIT:
            parts.append(
                f"- The character's role is: {constraints.role}. Let this shape their skills, "
                "equipment, and backstory\n"
            )
        elif constraints.role_mode is RoleMode.RANDOM:
            parts.append(RANDOM_ROLE_LINE)
        else:
            parts.append(DEFAULT_ROLE_LINE)

        parts.append(GENERAL_REQUIREMENTS)
        return "".join(parts)


def _distribution_text(constraints: GenerationConstraints) -> str:
    return ", ".join(f"{name} {level} levels" for name, level in constraints.class_levels())


def build_prompt(constraints: GenerationConstraints) -> str:
    """Build the generation prompt with the default template."""
    return PromptBuilder().build_prompt(constraints)
