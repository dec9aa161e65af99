"""Command-line entry point for NPCForge."""

import argparse
import logging
import sys
from typing import Optional, Sequence

import requests

from npcforge.api.llm_config import LLMConfigManager
from npcforge.api.ollama_client import OllamaClient
from npcforge.config import (
    DEFAULT_LEVEL_RANGE,
    DEFAULT_MAX_COUNT,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROLE,
    MAX_CLASSES,
    MAX_LEVEL,
    MIN_LEVEL,
    RANDOM_ROLE,
)
from npcforge.engine.generator import NPCGenerator
from npcforge.errors import ConstraintValidationError
from npcforge.models.constraints import GenerationConstraints
from npcforge.persistence.npc_writer import NPCWriter

logger = logging.getLogger(__name__)

EXIT_VALIDATION_ERROR = 2


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="npcforge",
        description="Generate D&D 2024 NPCs using Ollama AI",
    )
    parser.add_argument("-n", "--count", type=int, default=1,
                        help=f"Number of NPCs to generate (max {DEFAULT_MAX_COUNT})")
    parser.add_argument("--name", type=str, help="Specific name for the NPC (sets count to 1)")
    parser.add_argument("-r", "--race", type=str, help='Race for the NPC (e.g., "Dwarf", "Elf")')
    parser.add_argument("-c", "--class", dest="class_spec", type=str,
                        help=f'Class, or up to {MAX_CLASSES} comma-separated classes (e.g., "Fighter,Wizard")')
    parser.add_argument("-l", "--level", type=int, help=f"Total level ({MIN_LEVEL}-{MAX_LEVEL})")
    parser.add_argument("--lvl1", type=int, help="Levels in the first class")
    parser.add_argument("--lvl2", type=int, help="Levels in the second class")
    parser.add_argument("--lvl3", type=int, help="Levels in the third class")
    parser.add_argument("--low", type=int, default=DEFAULT_LEVEL_RANGE[0],
                        help="Lowest level when the level is random")
    parser.add_argument("--high", type=int, default=DEFAULT_LEVEL_RANGE[1],
                        help="Highest level when the level is random")
    parser.add_argument("-a", "--alignment", type=str, help='Alignment for the NPC (e.g., "CG", "LN")')
    parser.add_argument("--role", type=str, default=DEFAULT_ROLE,
                        help=f"Role or occupation, or '{RANDOM_ROLE}' to let the model choose")
    parser.add_argument("-o", "--output-dir", type=str, default=DEFAULT_OUTPUT_DIR,
                        help="Directory for the generated JSON files")
    parser.add_argument("--model", type=str, help="Override the Ollama model name")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug)")
    return parser.parse_args(argv)


def configure_logging(verbosity: int) -> None:
    """Configure root logging for the run."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(name)-19s - %(levelname)5s] %(message)s")


def resolve_count(count: int, name: Optional[str], max_count: int = DEFAULT_MAX_COUNT) -> int:
    """
    Apply the count rules: a fixed name means one NPC, and the count is
    clamped to ``max_count`` with a warning.

    Raises:
        ConstraintValidationError: if the count is below 1
    """
    if name:
        return 1
    if count < 1:
        raise ConstraintValidationError("Count must be at least 1")
    if count > max_count:
        print(f"✗ Error: Count limited to {max_count} NPCs maximum", file=sys.stderr)
        print(f"  Setting count to {max_count}\n")
        logger.info(f"Requested count {count} clamped to {max_count}")
        return max_count
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the generator. Returns the process exit status."""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    print("=== NPCForge - D&D 2024 NPC Generator ===\n")

    try:
        count = resolve_count(args.count, args.name)
        constraints = GenerationConstraints.from_options(
            name=args.name,
            race=args.race,
            class_spec=args.class_spec,
            level=args.level,
            lvl1=args.lvl1,
            lvl2=args.lvl2,
            lvl3=args.lvl3,
            low=args.low,
            high=args.high,
            alignment=args.alignment,
            role=args.role,
        )
    except ConstraintValidationError as e:
        print(f"✗ Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    config = LLMConfigManager().override(model=args.model)
    # One connection pool for every attempt of the run
    with requests.Session() as session:
        generator = NPCGenerator(
            OllamaClient(config, session=session),
            config=config,
            writer=NPCWriter(args.output_dir),
        )
        generator.run(constraints, count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
