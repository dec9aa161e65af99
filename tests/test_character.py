"""Tests for the character sheet models."""

import json

import pytest
from pydantic import ValidationError

from npcforge.models.character import CharacterRecord
from npcforge.prompts.prompt_builder import SCHEMA_EXAMPLE


class TestCharacterRecord:
    """Test suite for CharacterRecord."""

    def test_parse_complete_character(self, character_data):
        """Test parsing of a complete character."""
        character = CharacterRecord.model_validate(character_data)
        assert character.name == "Borin Ashgrave"
        assert character.class_name == "Cleric"
        assert character.initiative == -1
        assert character.skills[1].modifier == -1
        assert character.spells is not None
        assert character.spells.spell_slots.level_3 == 2
        assert character.spells.spell_slots.level_9 == 0
        assert character.spells.spells_known.level_2 == []

    def test_round_trip(self, character_data):
        """Test that serializing and parsing back yields an equal record."""
        character = CharacterRecord.model_validate(character_data)
        parsed = CharacterRecord.model_validate_json(character.to_json())
        assert parsed == character

    def test_serializes_wire_names(self, character_data):
        """Test that class_name is written back as 'class'."""
        character = CharacterRecord.model_validate(character_data)
        dumped = json.loads(character.to_json())
        assert dumped["class"] == "Cleric"
        assert "class_name" not in dumped

    def test_list_fields_default_to_empty(self, character_data):
        """Test that absent list fields default to empty lists."""
        for key in ("skills", "saving_throws", "languages", "tool_proficiencies", "attacks", "features"):
            del character_data[key]
        del character_data["equipment"]["gear"]
        del character_data["personality"]["traits"]
        del character_data["appearance"]["distinguishing_features"]
        character = CharacterRecord.model_validate(character_data)
        assert character.skills == []
        assert character.attacks == []
        assert character.features == []
        assert character.equipment.gear == []
        assert character.personality.traits == []
        assert character.appearance.distinguishing_features == []

    def test_optional_blocks_default_to_none(self, character_data):
        """Test that subclass and spells are optional."""
        del character_data["subclass"]
        del character_data["spells"]
        character = CharacterRecord.model_validate(character_data)
        assert character.subclass is None
        assert character.spells is None

    def test_missing_required_field(self, character_data):
        """Test that required fields without defaults are enforced."""
        del character_data["ability_scores"]
        with pytest.raises(ValidationError):
            CharacterRecord.model_validate(character_data)

    def test_negative_unsigned_field_rejected(self, character_data):
        """Test that unsigned stats reject negative values."""
        character_data["hit_points"]["max"] = -5
        with pytest.raises(ValidationError):
            CharacterRecord.model_validate(character_data)

    def test_record_is_immutable(self, character_data):
        """Test that records cannot be mutated after parsing."""
        character = CharacterRecord.model_validate(character_data)
        with pytest.raises(ValidationError):
            character.name = "Someone Else"

    def test_prompt_schema_example_parses(self):
        """Test that the schema sent in the prompt fits the model."""
        character = CharacterRecord.model_validate_json(SCHEMA_EXAMPLE)
        assert character.class_name == "Character class"
        assert character.appearance.height == "5'8\""
