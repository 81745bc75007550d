"""
Persistence rules for character records.

Every rule is checked so callers can surface all problems at once rather than
fixing them one round-trip at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from .character import ABILITY_NAMES, Character

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
LEVEL_MIN = 1
LEVEL_MAX = 20
ABILITY_MIN = 1
ABILITY_MAX = 20
BACKGROUND_MAX_LENGTH = 1000


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class CharacterValidationError(ValueError):
    """Raised when a character breaks one or more persistence rules."""

    def __init__(self, errors: List[FieldError]):
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid character: {summary}")


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def _check_int_range(field: str, label: str, value: Any, low: int, high: int) -> FieldError | None:
    if value is None:
        return FieldError(field, f"{label} is required")
    # bool is an int subclass; a checkbox-ish True should not pass as level 1
    if isinstance(value, bool) or not isinstance(value, int):
        return FieldError(field, f"{label} must be a whole number")
    if value < low:
        return FieldError(field, f"{label} must be at least {low}")
    if value > high:
        return FieldError(field, f"{label} cannot exceed {high}")
    return None


def validate_character(character: Character) -> List[FieldError]:
    """Return one FieldError per violated rule; empty when the record is persistable."""
    errors: List[FieldError] = []

    if _is_blank(character.name):
        errors.append(FieldError("name", "Name is required"))
    elif not NAME_MIN_LENGTH <= len(character.name.strip()) <= NAME_MAX_LENGTH:
        errors.append(
            FieldError("name", f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters")
        )

    if _is_blank(character.race):
        errors.append(FieldError("race", "Race is required"))
    if _is_blank(character.character_class):
        errors.append(FieldError("characterClass", "Character class is required"))

    level_error = _check_int_range("level", "Level", character.level, LEVEL_MIN, LEVEL_MAX)
    if level_error:
        errors.append(level_error)

    for ability in ABILITY_NAMES:
        error = _check_int_range(
            ability, ability.capitalize(), getattr(character, ability), ABILITY_MIN, ABILITY_MAX
        )
        if error:
            errors.append(error)

    if character.background is not None and len(character.background) > BACKGROUND_MAX_LENGTH:
        errors.append(
            FieldError("background", f"Background cannot exceed {BACKGROUND_MAX_LENGTH} characters")
        )

    return errors


def ensure_valid(character: Character) -> Character:
    errors = validate_character(character)
    if errors:
        raise CharacterValidationError(errors)
    return character
