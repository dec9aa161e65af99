"""Pytest configuration and fixtures."""

import json

import pytest


@pytest.fixture
def character_data():
    """A complete character as the model would return it."""
    return {
        "name": "Borin Ashgrave",
        "race": "Hill Dwarf",
        "class": "Cleric",
        "subclass": "Forge Domain",
        "level": 5,
        "background": "Guild Artisan",
        "alignment": "Lawful Neutral",
        "ability_scores": {
            "strength": 14,
            "dexterity": 8,
            "constitution": 15,
            "intelligence": 10,
            "wisdom": 16,
            "charisma": 12,
        },
        "hit_points": {"max": 43, "current": 43, "temporary": 0, "hit_dice": "5d8"},
        "armor_class": 18,
        "initiative": -1,
        "speed": 25,
        "proficiency_bonus": 3,
        "skills": [
            {"name": "Religion", "modifier": 3, "proficient": True},
            {"name": "Stealth", "modifier": -1, "proficient": False},
        ],
        "saving_throws": ["Wisdom", "Charisma"],
        "languages": ["Common", "Dwarvish"],
        "tool_proficiencies": ["Smith's Tools"],
        "attacks": [
            {
                "name": "Warhammer",
                "attack_bonus": 5,
                "damage": "1d8+2",
                "damage_type": "bludgeoning",
                "range": "Melee",
                "properties": ["Versatile"],
            }
        ],
        "spells": {
            "spellcasting_ability": "Wisdom",
            "spell_save_dc": 14,
            "spell_attack_bonus": 6,
            "spell_slots": {"level_1": 4, "level_2": 3, "level_3": 2},
            "spells_known": {
                "cantrips": ["Sacred Flame", "Guidance"],
                "level_1": ["Cure Wounds", "Bless"],
                "level_3": ["Spirit Guardians"],
            },
        },
        "equipment": {
            "armor": ["Chain Mail", "Shield"],
            "weapons": ["Warhammer"],
            "gear": ["Holy Symbol", "Smith's Tools"],
            "treasure": {"gold": 120, "items": ["Silver Anvil Charm"]},
        },
        "personality": {
            "traits": ["Gruff but fair"],
            "ideals": "Craft is a prayer",
            "bonds": "My clan's forge",
            "flaws": "I never forgive a broken oath",
        },
        "backstory": "Raised beside the clan forge, Borin learned the hammer before he learned to read.",
        "appearance": {
            "age": 142,
            "height": "4'5\"",
            "weight": "160 lbs",
            "eyes": "Grey",
            "hair": "Red",
            "skin": "Ruddy",
            "distinguishing_features": ["Burn scar on left hand"],
        },
        "features": [{"name": "Channel Divinity", "description": "Artisan's Blessing."}],
    }


@pytest.fixture
def character_json(character_data):
    """Character as the raw text inside the Ollama envelope."""
    return json.dumps(character_data)


@pytest.fixture
def envelope_body(character_json):
    """Full Ollama /api/generate response body."""
    return json.dumps({"model": "qwen2.5:32b-instruct", "response": character_json, "done": True})
