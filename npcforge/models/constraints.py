"""User constraints for character generation."""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from npcforge.config import (
    DEFAULT_LEVEL_RANGE,
    DEFAULT_ROLE,
    MAX_CLASSES,
    MAX_LEVEL,
    MIN_LEVEL,
    RANDOM_ROLE,
)
from npcforge.errors import ConstraintValidationError

logger = logging.getLogger(__name__)

LEVEL_BOUNDS_MESSAGE = f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}"


class RoleMode(str, Enum):
    """How the role constraint is rendered into the prompt."""

    DEFAULT = "default"
    RANDOM = "random"
    EXPLICIT = "explicit"


def parse_class_spec(class_spec: Optional[str]) -> list[str]:
    """Split a comma-separated class string into at most MAX_CLASSES trimmed names."""
    if not class_spec:
        return []
    names = [part.strip() for part in class_spec.split(",") if part.strip()]
    if len(names) > MAX_CLASSES:
        logger.debug(f"Truncating classes {names} to the first {MAX_CLASSES}")
    return names[:MAX_CLASSES]


def _check_level(value: int) -> int:
    if not MIN_LEVEL <= value <= MAX_LEVEL:
        raise ValueError(LEVEL_BOUNDS_MESSAGE)
    return value


class GenerationConstraints(BaseModel):
    """Optional constraints narrowing what the model must produce."""

    model_config = ConfigDict(frozen=True)  # Read-only for the whole run

    name: Optional[str] = Field(default=None, description="Exact character name")
    race: Optional[str] = Field(default=None, description="Race, free text")
    classes: list[str] = Field(
        default_factory=list, description=f"Up to {MAX_CLASSES} class names, in order"
    )
    level: Optional[int] = Field(default=None, description="Total character level")
    level_distribution: list[int] = Field(
        default_factory=list, description="Per-class levels, same order as classes"
    )
    level_range: tuple[int, int] = Field(
        default=DEFAULT_LEVEL_RANGE, description="(low, high) bounds for a random level"
    )
    alignment: Optional[str] = Field(default=None, description="Alignment, free text")
    role: str = Field(default=DEFAULT_ROLE, description=f"Role, or '{RANDOM_ROLE}'")

    @field_validator("name", "race", "alignment", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        """Treat blank strings as not supplied."""
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("classes", mode="before")
    @classmethod
    def split_classes(cls, value: Any) -> Any:
        """Accept a comma-separated string as well as a list."""
        if value is None:
            return []
        if isinstance(value, str):
            return parse_class_spec(value)
        return parse_class_spec(",".join(str(item) for item in value))

    @field_validator("role", mode="before")
    @classmethod
    def default_role_when_blank(cls, value: Any) -> Any:
        """Empty role means the default role."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ROLE
        return value.strip() if isinstance(value, str) else value

    @field_validator("level")
    @classmethod
    def check_level(cls, value: Optional[int]) -> Optional[int]:
        """Level must be within bounds."""
        if value is not None:
            _check_level(value)
        return value

    @field_validator("level_distribution")
    @classmethod
    def check_distribution_levels(cls, value: list[int]) -> list[int]:
        """Every per-class level must be within bounds."""
        for level in value:
            _check_level(level)
        return value

    @field_validator("level_range")
    @classmethod
    def check_level_range(cls, value: tuple[int, int]) -> tuple[int, int]:
        """Both bounds within limits, low not above high."""
        low, high = value
        if not (MIN_LEVEL <= low <= MAX_LEVEL and MIN_LEVEL <= high <= MAX_LEVEL):
            raise ValueError(f"Level range bounds must be between {MIN_LEVEL} and {MAX_LEVEL}")
        if low > high:
            raise ValueError(f"Low level ({low}) cannot be greater than high level ({high})")
        return value

    @model_validator(mode="after")
    def check_distribution(self) -> "GenerationConstraints":
        """Distribution must match the classes and the total level."""
        if not self.level_distribution:
            return self

        if len(self.level_distribution) != len(self.classes):
            raise ValueError(
                f"Number of class levels ({len(self.level_distribution)}) must match "
                f"number of classes ({len(self.classes)})"
            )

        total = sum(self.level_distribution)
        if not MIN_LEVEL <= total <= MAX_LEVEL:
            raise ValueError(
                f"Total of class levels ({total}) must be between {MIN_LEVEL} and {MAX_LEVEL}"
            )

        if self.level is not None and self.level != total:
            raise ValueError(
                f"Level ({self.level}) does not match the sum of class levels ({total})"
            )

        return self

    @classmethod
    def from_options(
        cls,
        name: Optional[str] = None,
        race: Optional[str] = None,
        class_spec: Optional[str] = None,
        level: Optional[int] = None,
        lvl1: Optional[int] = None,
        lvl2: Optional[int] = None,
        lvl3: Optional[int] = None,
        low: int = DEFAULT_LEVEL_RANGE[0],
        high: int = DEFAULT_LEVEL_RANGE[1],
        alignment: Optional[str] = None,
        role: Optional[str] = None,
    ) -> "GenerationConstraints":
        """
        Build constraints from flat command-line style options.

        Raises:
            ConstraintValidationError: if any option or combination is invalid
        """
        distribution: list[int] = []
        seen_gap = False
        for index, value in enumerate((lvl1, lvl2, lvl3), start=1):
            if value is None:
                seen_gap = True
                continue
            if seen_gap:
                raise ConstraintValidationError(
                    f"Class levels must be given in order: --lvl{index} set without --lvl{index - 1}"
                )
            distribution.append(value)

        try:
            return cls(
                name=name,
                race=race,
                classes=class_spec,
                level=level,
                level_distribution=distribution,
                level_range=(low, high),
                alignment=alignment,
                role=role,
            )
        except ValidationError as e:
            raise ConstraintValidationError(_format_errors(e)) from e

    @property
    def is_multiclass(self) -> bool:
        """Whether more than one class was requested."""
        return len(self.classes) > 1

    @property
    def total_level(self) -> Optional[int]:
        """Explicit level, else the sum of the distribution, else None."""
        if self.level is not None:
            return self.level
        if self.level_distribution:
            return sum(self.level_distribution)
        return None

    @property
    def has_custom_level_range(self) -> bool:
        """True when a non-default range applies (no explicit level or distribution)."""
        return self.total_level is None and self.level_range != DEFAULT_LEVEL_RANGE

    @property
    def role_mode(self) -> RoleMode:
        """Classify the role constraint."""
        if self.role.lower() == RANDOM_ROLE:
            return RoleMode.RANDOM
        if self.role.lower() == DEFAULT_ROLE.lower():
            return RoleMode.DEFAULT
        return RoleMode.EXPLICIT

    @property
    def has_constraints(self) -> bool:
        """Whether any field narrows generation."""
        return any(
            (
                self.name,
                self.race,
                self.classes,
                self.level is not None,
                self.level_distribution,
                self.has_custom_level_range,
                self.alignment,
                self.role_mode is not RoleMode.DEFAULT,
            )
        )

    def class_levels(self) -> list[tuple[str, int]]:
        """Pairs of (class name, level) for an explicit distribution."""
        return list(zip(self.classes, self.level_distribution))


def _format_errors(error: ValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    messages = []
    for item in error.errors():
        message = item["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{field}: {message}" if field else message)
    return "; ".join(messages)
