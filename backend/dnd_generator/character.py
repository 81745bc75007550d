from __future__ import annotations

import math
from dataclasses import asdict, dataclass, replace
from typing import Dict, Optional

ABILITY_NAMES: tuple[str, ...] = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

DEFAULT_LEVEL = 1
DEFAULT_ABILITY_SCORE = 10


def ability_modifier(score: int) -> int:
    """D&D 5e modifier: floor((score - 10) / 2)."""
    return math.floor((score - 10) / 2)


def format_modifier(modifier: int) -> str:
    return f"+{modifier}" if modifier >= 0 else str(modifier)


@dataclass(frozen=True)
class Character:
    name: str
    race: str
    character_class: str
    level: int = DEFAULT_LEVEL
    strength: int = DEFAULT_ABILITY_SCORE
    dexterity: int = DEFAULT_ABILITY_SCORE
    constitution: int = DEFAULT_ABILITY_SCORE
    intelligence: int = DEFAULT_ABILITY_SCORE
    wisdom: int = DEFAULT_ABILITY_SCORE
    charisma: int = DEFAULT_ABILITY_SCORE
    background: Optional[str] = None
    id: Optional[int] = None

    def with_id(self, character_id: int) -> "Character":
        return replace(self, id=character_id)

    def ability_scores(self) -> Dict[str, int]:
        return {ability: getattr(self, ability) for ability in ABILITY_NAMES}

    def modifiers(self) -> Dict[str, str]:
        """Formatted modifier per ability, e.g. {"strength": "+2", ...}."""
        return {
            ability: format_modifier(ability_modifier(score))
            for ability, score in self.ability_scores().items()
        }

    def to_dict(self) -> dict:
        return asdict(self)
