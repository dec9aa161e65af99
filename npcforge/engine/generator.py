"""Sequential NPC generation run."""

import logging
import sys
import time
from typing import Callable, Optional, Protocol, TextIO

from pydantic import BaseModel, ConfigDict, Field, computed_field

from npcforge.api.llm_config import LLMConfig
from npcforge.errors import NPCForgeError
from npcforge.models.character import CharacterRecord
from npcforge.models.constraints import GenerationConstraints
from npcforge.persistence.npc_writer import NPCWriter
from npcforge.prompts.prompt_builder import PromptBuilder
from npcforge.validation.output_validator import OutputValidator

logger = logging.getLogger(__name__)


class GenerationClient(Protocol):
    """Anything that turns a prompt into raw model text."""

    def generate(self, prompt: str) -> str:
        ...


class AttemptResult(BaseModel):
    """Outcome of a single generation attempt."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1, description="1-based attempt number")
    character: Optional[CharacterRecord] = Field(default=None, description="Parsed character on success")
    path: Optional[str] = Field(default=None, description="Written file on success")
    error_kind: Optional[str] = Field(default=None, description="Error category on failure")
    error: Optional[str] = Field(default=None, description="Error detail on failure")

    @property
    def ok(self) -> bool:
        """Whether the attempt produced a saved character."""
        return self.error_kind is None


class RunSummary(BaseModel):
    """Tally of a whole run."""

    results: list[AttemptResult] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.ok)


class NPCGenerator:
    """Runs 1..N independent generation attempts, one after another."""

    def __init__(
        self,
        client: GenerationClient,
        config: Optional[LLMConfig] = None,
        prompt_builder: Optional[PromptBuilder] = None,
        validator: Optional[OutputValidator] = None,
        writer: Optional[NPCWriter] = None,
        sleep: Callable[[float], None] = time.sleep,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            client: Model client used for every attempt
            config: LLM configuration (model name and inter-attempt delay)
            prompt_builder: Prompt builder (default template if None)
            validator: Output validator (default if None)
            writer: Character file writer (current directory if None)
            sleep: Pause function, replaced in tests
            out: Stream for progress output (stdout if None)
            err: Stream for error output (stderr if None)
        """
        self.client = client
        self.config = config or LLMConfig()
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.validator = validator or OutputValidator()
        self.writer = writer or NPCWriter()
        self._sleep = sleep
        self._out = out
        self._err = err

    def _print(self, message: str = "") -> None:
        print(message, file=self._out or sys.stdout)

    def _print_error(self, message: str) -> None:
        print(message, file=self._err or sys.stderr)

    def run(self, constraints: GenerationConstraints, count: int) -> RunSummary:
        """Run ``count`` attempts and print a summary."""
        summary = RunSummary()
        self._print(f"Generating {count} NPC(s)...\n")

        for index in range(1, count + 1):
            if count > 1:
                self._print(f"--- Generating NPC {index}/{count} ---")

            result = self.run_attempt(constraints, index=index if count > 1 else None, attempt=index)
            summary.results.append(result)
            self._report(result)

            # Small delay between requests to prevent overwhelming Ollama
            if index < count:
                self._sleep(self.config.request_delay)

        self._print("=== Summary ===")
        self._print(f"Successfully generated: {summary.succeeded}")
        if summary.failed > 0:
            self._print(f"Failed: {summary.failed}")

        logger.info(f"Run finished: {summary.succeeded} succeeded, {summary.failed} failed")
        return summary

    def run_attempt(
        self,
        constraints: GenerationConstraints,
        index: Optional[int] = None,
        attempt: int = 1,
    ) -> AttemptResult:
        """
        Request, parse and save one character.
        Failures are returned as a result, never raised.

        Args:
            constraints: Constraints for the prompt
            index: File name suffix, or None for a single-character run
            attempt: 1-based attempt number
        """
        self._print("Generating NPC with Ollama...")
        self._print("This may take a minute or two...\n")

        try:
            prompt = self.prompt_builder.build_prompt(constraints)
            raw = self.client.generate(prompt)
            character = self.validator.parse_character(raw)
            self._describe(character)
            path = self.writer.save(character, index)
        except NPCForgeError as e:
            logger.debug(f"Attempt {attempt} failed with {type(e).__name__}")
            return AttemptResult(index=attempt, error_kind=e.kind, error=e.message)
        except Exception as e:
            logger.error(f"Unexpected error in attempt {attempt}: {e}", exc_info=True)
            return AttemptResult(index=attempt, error_kind="unexpected", error=str(e))

        return AttemptResult(index=attempt, character=character, path=path)

    def _describe(self, character: CharacterRecord) -> None:
        self._print(f"✓ Successfully generated NPC: {character.name}")
        self._print(f"  Race: {character.race}")
        self._print(f"  Class: {character.class_name} (Level {character.level})")
        if character.subclass:
            self._print(f"  Subclass: {character.subclass}")
        self._print(f"  Background: {character.background}")
        self._print(f"  Alignment: {character.alignment}")

    def _report(self, result: AttemptResult) -> None:
        if result.ok:
            self._print(f"✓ Saved to: {result.path}")
        elif result.error_kind == "file":
            self._print_error(f"✗ Error saving file: {result.error}")
        else:
            self._print_error(f"✗ Error generating NPC {result.index}: {result.error}")
            if result.index == 1 and result.error_kind in ("connection", "transport"):
                self._print_error("\nMake sure Ollama is running and you have the model installed:")
                self._print_error(f"  ollama pull {self.config.model}")
        self._print()
