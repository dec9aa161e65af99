"""Validates model outputs against Pydantic schemas."""

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from npcforge.config import DEFAULT_SCHEMA_EXCERPT_LENGTH
from npcforge.errors import SchemaParseError
from npcforge.models.character import CharacterRecord

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class OutputValidator:
    """Maps raw model output onto Pydantic schemas."""

    def __init__(self, excerpt_length: int = DEFAULT_SCHEMA_EXCERPT_LENGTH) -> None:
        """Initialize output validator."""
        self.excerpt_length = excerpt_length

    def validate(self, output: Any, schema: type[T]) -> T:
        """
        Validate output against a Pydantic schema.
        Strings are decoded as JSON first.

        Raises:
            SchemaParseError: if the output is not JSON or does not fit the schema
        """
        excerpt = self._excerpt(output)

        if isinstance(output, str):
            try:
                output = json.loads(output)
            except json.JSONDecodeError as e:
                raise SchemaParseError(
                    f"Output is not valid JSON ({e}). Response was: {excerpt}", excerpt
                ) from e

        try:
            return schema.model_validate(output)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            fields = ", ".join(".".join(str(part) for part in err["loc"]) or "<root>" for err in errors)
            logger.debug(f"{schema.__name__} validation failed for: {fields}")
            raise SchemaParseError(
                f"Failed to parse {schema.__name__} ({len(errors)} error(s) at {fields}). "
                f"Response was: {excerpt}",
                excerpt,
                errors,
            ) from e

    def parse_character(self, raw: str) -> CharacterRecord:
        """Parse the model's inner response text into a character."""
        return self.validate(raw, CharacterRecord)

    def _excerpt(self, output: Any) -> str:
        text = output if isinstance(output, str) else repr(output)
        return text[: self.excerpt_length]


def parse_character(raw: str) -> CharacterRecord:
    """Parse a character with the default validator."""
    return OutputValidator().parse_character(raw)
