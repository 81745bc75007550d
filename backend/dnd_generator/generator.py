from __future__ import annotations

import random
from typing import Protocol, Sequence, TypeVar

from .character import Character

T = TypeVar("T")

RACES: tuple[str, ...] = (
    "Human",
    "Elf",
    "Dwarf",
    "Halfling",
    "Dragonborn",
    "Gnome",
    "Half-Elf",
    "Half-Orc",
    "Tiefling",
)

CLASSES: tuple[str, ...] = (
    "Barbarian",
    "Bard",
    "Cleric",
    "Druid",
    "Fighter",
    "Monk",
    "Paladin",
    "Ranger",
    "Rogue",
    "Sorcerer",
    "Warlock",
    "Wizard",
)

NAME_PREFIXES: tuple[str, ...] = (
    "Thorn", "Shadow", "Storm", "Iron", "Silver", "Dark", "Light",
    "Fire", "Ice", "Stone", "Wind", "Thunder", "Moon", "Sun",
)

NAME_SUFFIXES: tuple[str, ...] = (
    "blade", "heart", "striker", "walker", "seeker", "bringer",
    "warden", "keeper", "slayer", "hunter", "weaver", "caller",
)

BACKGROUND_ORIGINS: tuple[str, ...] = (
    "a small village",
    "a bustling city",
    "a nomadic tribe",
    "a secluded monastery",
    "a noble house",
)

BACKGROUND_MOTIVATIONS: tuple[str, ...] = (
    "seeks glory",
    "searches for lost family",
    "wants revenge",
    "desires knowledge",
    "pursues justice",
)

# New characters start low; persisted records may go up to 20.
NEW_CHARACTER_MAX_LEVEL = 10


class RandomSource(Protocol):
    def choice(self, seq: Sequence[T]) -> T: ...

    def randint(self, a: int, b: int) -> int: ...


def roll_ability_score(rng: RandomSource) -> int:
    """Roll 4d6 and keep the highest three."""
    rolls = sorted(rng.randint(1, 6) for _ in range(4))
    return sum(rolls[1:])


def generate_name(rng: RandomSource) -> str:
    return rng.choice(NAME_PREFIXES) + rng.choice(NAME_SUFFIXES)


def generate_background(rng: RandomSource, *, name: str, race: str, character_class: str) -> str:
    origin = rng.choice(BACKGROUND_ORIGINS)
    motivation = rng.choice(BACKGROUND_MOTIVATIONS)
    return f"{name} is a {race} {character_class} from {origin} who {motivation}."


def generate_character(rng: RandomSource | None = None) -> Character:
    """
    Build a random, always-valid character.

    - Pass a seeded ``random.Random`` for repeatable output.
    - The returned record has no id; persisting it is the caller's job.
    """
    rng = rng or random.Random()

    name = generate_name(rng)
    race = rng.choice(RACES)
    character_class = rng.choice(CLASSES)
    level = rng.randint(1, NEW_CHARACTER_MAX_LEVEL)

    strength = roll_ability_score(rng)
    dexterity = roll_ability_score(rng)
    constitution = roll_ability_score(rng)
    intelligence = roll_ability_score(rng)
    wisdom = roll_ability_score(rng)
    charisma = roll_ability_score(rng)

    return Character(
        name=name,
        race=race,
        character_class=character_class,
        level=level,
        strength=strength,
        dexterity=dexterity,
        constitution=constitution,
        intelligence=intelligence,
        wisdom=wisdom,
        charisma=charisma,
        background=generate_background(rng, name=name, race=race, character_class=character_class),
    )
