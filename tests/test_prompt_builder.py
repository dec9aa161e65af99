"""Tests for PromptBuilder."""

from langchain_core.prompts import PromptTemplate

from npcforge.models.constraints import GenerationConstraints
from npcforge.prompts.prompt_builder import SCHEMA_EXAMPLE, PromptBuilder, build_prompt


def constraints(**options):
    return GenerationConstraints.from_options(**options)


class TestPromptBuilder:
    """Test suite for PromptBuilder."""

    def test_create_simple_prompt(self):
        """Test creation of simple prompt."""
        prompt = PromptBuilder.create_simple_prompt("Hello {name}")
        assert isinstance(prompt, PromptTemplate)

    def test_deterministic(self):
        """Test that identical constraints yield identical prompts."""
        options = {"race": "Tiefling", "class_spec": "Bard,Warlock", "lvl1": 4, "lvl2": 2, "role": "Spy"}
        assert build_prompt(constraints(**options)) == build_prompt(constraints(**options))
        assert build_prompt(constraints()) == PromptBuilder().build_prompt(constraints())

    def test_unconstrained_prompt(self):
        """Test the prompt with no constraints."""
        prompt = build_prompt(constraints())
        assert prompt.startswith("You are a D&D 2024 character generator.")
        assert "USER CONSTRAINTS" not in prompt
        assert "Choose a COMPLETELY RANDOM race" in prompt
        assert "Choose a COMPLETELY RANDOM class" in prompt
        assert "Choose a random level between 1-20" in prompt
        assert "Choose a RANDOM alignment" in prompt
        assert "The character is a Mercenary" in prompt
        assert prompt.endswith("Generate a completely random character now:")

    def test_schema_embedded_verbatim(self):
        """Test that the JSON template survives formatting unchanged."""
        prompt = build_prompt(constraints(name="Vex"))
        assert SCHEMA_EXAMPLE in prompt
        assert '"ability_scores": {' in prompt

    def test_supplied_constraints_only(self):
        """Test that only supplied fields appear in the constraints block."""
        prompt = build_prompt(constraints(name="Mira Vale", race="Goliath", alignment="CG"))
        assert "USER CONSTRAINTS (MUST follow these exactly):" in prompt
        assert "- Name MUST be: Mira Vale" in prompt
        assert "- Race MUST be: Goliath" in prompt
        assert "- Alignment MUST be: CG" in prompt
        assert "Class MUST be" not in prompt
        assert "Level MUST be" not in prompt
        assert "Role MUST be" not in prompt
        assert "- Use the specified race: Goliath" in prompt
        assert "- Use the specified alignment: CG" in prompt

    def test_single_class_and_level(self):
        """Test a single class with an explicit level."""
        prompt = build_prompt(constraints(class_spec="Ranger", level=7))
        assert "- Class MUST be: Ranger" in prompt
        assert "- Level MUST be: 7" in prompt
        assert "- Use the specified class: Ranger and choose an appropriate subclass" in prompt
        assert "- Use the specified level: 7" in prompt
        assert "MULTICLASS" not in prompt

    def test_multiclass_distribution(self):
        """Test explicit per-class levels."""
        prompt = build_prompt(constraints(class_spec="Fighter,Wizard", lvl1=3, lvl2=5))
        assert "- Classes MUST be (multiclass): Fighter / Wizard" in prompt
        assert "Fighter 3 levels, Wizard 5 levels" in prompt
        assert "Total character level: 8" in prompt
        assert "MULTICLASS character with these classes: Fighter / Wizard" in prompt
        assert "Level MUST be:" not in prompt
        assert "Use the specified level" not in prompt

    def test_multiclass_with_total_level(self):
        """Test a multiclass split hint for a given total level."""
        prompt = build_prompt(constraints(class_spec="Rogue,Cleric", level=9))
        assert "- Split the total level of 9 across the classes" in prompt
        assert "- Level MUST be: 9" in prompt

    def test_multiclass_free_level(self):
        """Test a multiclass character with no level given."""
        prompt = build_prompt(constraints(class_spec="Rogue,Cleric"))
        assert "- Choose how to split the total level across the classes" in prompt
        assert "Choose a random level between 1-20" in prompt

    def test_multiclass_truncated_to_three(self):
        """Test that only the first three classes reach the prompt."""
        prompt = build_prompt(constraints(class_spec="Fighter,Wizard,Rogue,Monk"))
        assert "Fighter / Wizard / Rogue" in prompt
        assert "Monk" not in prompt

    def test_level_range_suppressed_at_defaults(self):
        """Test that the default range emits no range directive."""
        prompt = build_prompt(constraints(low=1, high=10))
        assert "Level MUST be between" not in prompt
        assert "Choose a random level between 1-20" in prompt

    def test_custom_level_range(self):
        """Test a non-default level range."""
        prompt = build_prompt(constraints(low=5, high=12))
        assert "- Level MUST be between 5 and 12" in prompt
        assert "- Choose a random level between 5-12" in prompt

    def test_level_takes_precedence_over_range(self):
        """Test that an explicit level hides the range."""
        prompt = build_prompt(constraints(level=3, low=5, high=12))
        assert "- Level MUST be: 3" in prompt
        assert "between 5" not in prompt

    def test_explicit_role(self):
        """Test an explicit role."""
        prompt = build_prompt(constraints(role="Smuggler"))
        assert "- Role MUST be: Smuggler" in prompt
        assert "The character's role is: Smuggler" in prompt
        assert "The character is a Mercenary" not in prompt

    def test_random_role(self):
        """Test the random role sentinel, case-insensitively."""
        prompt = build_prompt(constraints(role="Random"))
        assert "USER CONSTRAINTS" in prompt
        assert "choose any role or occupation freely" in prompt
        assert "Choose a RANDOM role or occupation" in prompt
        assert "Role MUST be" not in prompt

    def test_braces_in_user_input(self):
        """Test that braces in constraint values are passed through literally."""
        prompt = build_prompt(constraints(name="{Nameless}"))
        assert "- Name MUST be: {Nameless}" in prompt
