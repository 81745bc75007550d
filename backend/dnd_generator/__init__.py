"""
Character generation and validation core.

Provides the immutable character value, the random generator, and the rule
table every record must pass before it is persisted.
"""

from .character import Character, ability_modifier, format_modifier  # noqa: F401
from .generator import generate_character, roll_ability_score  # noqa: F401
from .validation import CharacterValidationError, FieldError, ensure_valid, validate_character  # noqa: F401
