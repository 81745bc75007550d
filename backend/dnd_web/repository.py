"""Persistence helpers mapping character values to database rows."""

import logging
from typing import List

from sqlmodel import Session, select

from dnd_generator.character import Character
from dnd_generator.validation import ensure_valid
from dnd_web.models import CharacterRow

logger = logging.getLogger(__name__)


class CharacterNotFoundError(LookupError):
    """Raised when no character exists for the requested id."""

    def __init__(self, character_id):
        self.character_id = character_id
        super().__init__(f"Character {character_id} not found")


def _to_character(row: CharacterRow) -> Character:
    return Character(
        id=row.id,
        name=row.name,
        race=row.race,
        character_class=row.character_class,
        level=row.level,
        strength=row.strength,
        dexterity=row.dexterity,
        constitution=row.constitution,
        intelligence=row.intelligence,
        wisdom=row.wisdom,
        charisma=row.charisma,
        background=row.background,
    )


def _apply(row: CharacterRow, character: Character) -> CharacterRow:
    row.name = character.name
    row.race = character.race
    row.character_class = character.character_class
    row.level = character.level
    row.strength = character.strength
    row.dexterity = character.dexterity
    row.constitution = character.constitution
    row.intelligence = character.intelligence
    row.wisdom = character.wisdom
    row.charisma = character.charisma
    row.background = character.background
    return row


def _get_row(session: Session, character_id: int) -> CharacterRow:
    row = session.get(CharacterRow, character_id)
    if row is None:
        raise CharacterNotFoundError(character_id)
    return row


def _select_all(session: Session, *criteria) -> List[Character]:
    statement = select(CharacterRow)
    for criterion in criteria:
        statement = statement.where(criterion)
    rows = session.exec(statement.order_by(CharacterRow.id)).all()
    return [_to_character(row) for row in rows]


def save_character(session: Session, character: Character) -> Character:
    """Insert a new record and return it with the assigned id."""
    ensure_valid(character)
    row = _apply(CharacterRow(), character)
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("Created character %s (%s)", row.id, row.name)
    return _to_character(row)


def update_character(session: Session, character_id: int, character: Character) -> Character:
    """Replace every field of an existing record."""
    row = _get_row(session, character_id)
    ensure_valid(character)
    _apply(row, character)
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("Updated character %s (%s)", row.id, row.name)
    return _to_character(row)


def get_character(session: Session, character_id: int) -> Character:
    return _to_character(_get_row(session, character_id))


def delete_character(session: Session, character_id: int) -> None:
    row = _get_row(session, character_id)
    session.delete(row)
    session.commit()
    logger.info("Deleted character %s", character_id)


def list_characters(session: Session) -> List[Character]:
    return _select_all(session)


def find_by_race(session: Session, race: str) -> List[Character]:
    return _select_all(session, CharacterRow.race == race)


def find_by_class(session: Session, character_class: str) -> List[Character]:
    return _select_all(session, CharacterRow.character_class == character_class)


def find_by_level(session: Session, level: int) -> List[Character]:
    return _select_all(session, CharacterRow.level == level)


def search_by_name(session: Session, fragment: str) -> List[Character]:
    """Case-insensitive substring match on name."""
    return _select_all(session, CharacterRow.name.icontains(fragment, autoescape=True))
