"""Writes generated characters to disk."""

import logging
from pathlib import Path
from typing import Optional

from npcforge.config import DEFAULT_OUTPUT_DIR
from npcforge.errors import FileWriteError
from npcforge.models.character import CharacterRecord

logger = logging.getLogger(__name__)

# Replaced with underscores so a model-chosen name stays a single path component
UNSAFE_FILENAME_CHARACTERS = (" ", "/", "\\", "\0")
FALLBACK_FILENAME = "npc"


def character_filename(name: str, index: Optional[int] = None) -> str:
    """
    File name for a character: spaces and path separators become
    underscores, leading dots are dropped, and an index suffix is added
    when the run produces more than one character.
    """
    base_name = name
    for unsafe in UNSAFE_FILENAME_CHARACTERS:
        base_name = base_name.replace(unsafe, "_")
    base_name = base_name.lstrip(".") or FALLBACK_FILENAME
    if index is not None:
        return f"{base_name}_{index}.json"
    return f"{base_name}.json"


class NPCWriter:
    """Saves characters as pretty-printed JSON files."""

    def __init__(self, output_directory: str = DEFAULT_OUTPUT_DIR):
        """
        Initialize writer.

        Args:
            output_directory: Directory where character files will be saved
        """
        self.output_directory = Path(output_directory)

    def _ensure_directory_exists(self) -> None:
        """Ensure output directory exists, create if it doesn't."""
        try:
            self.output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileWriteError(
                f"Failed to create output directory {self.output_directory}: {e}",
                str(self.output_directory),
            ) from e

    def _target_path(self, name: str, index: Optional[int]) -> Path:
        """Output file path, guaranteed to sit directly in the output directory."""
        file_path = self.output_directory / character_filename(name, index)
        if file_path.resolve().parent != self.output_directory.resolve():
            raise FileWriteError(
                f"Refusing to write {file_path} outside {self.output_directory}", str(file_path)
            )
        return file_path

    def save(self, character: CharacterRecord, index: Optional[int] = None) -> str:
        """
        Save a character, using structure: {output_directory}/{Name}[_{index}].json

        Args:
            character: Character to save
            index: 1-based attempt index, or None for single-character runs

        Returns:
            Path to the written file
        """
        self._ensure_directory_exists()
        file_path = self._target_path(character.name, index)
        temp_path = file_path.with_name(f"{file_path.name}.tmp")

        try:
            character_json = character.to_json()

            # Write to file atomically
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(character_json)

            temp_path.replace(file_path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise FileWriteError(f"Failed to write to file: {file_path} ({e})", str(file_path)) from e

        logger.debug(f"Saved character {character.name!r} to {file_path}")
        return str(file_path)
