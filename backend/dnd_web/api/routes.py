import logging
import random
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from dnd_generator.generator import CLASSES, RACES, generate_character
from dnd_web import repository
from dnd_web.db import get_rng, get_session
from dnd_web.schemas import (
    CharacterIn,
    CharacterOut,
    NotFoundResponse,
    OptionsResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/characters", tags=["characters"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": NotFoundResponse}}
REJECTED = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


def _serialize_all(characters) -> List[CharacterOut]:
    return [CharacterOut.from_character(c) for c in characters]


# Fixed paths are registered before /{character_id} so they are not read as ids.


@router.get("", response_model=List[CharacterOut])
def list_characters(session: Session = Depends(get_session)) -> List[CharacterOut]:
    return _serialize_all(repository.list_characters(session))


@router.get("/options", response_model=OptionsResponse)
def get_options() -> OptionsResponse:
    """Races and classes offered by the generator and the forms."""
    return OptionsResponse(races=list(RACES), classes=list(CLASSES))


@router.get("/search", response_model=List[CharacterOut])
def search_characters(
    name: str = Query(..., description="Case-insensitive name fragment"),
    session: Session = Depends(get_session),
) -> List[CharacterOut]:
    return _serialize_all(repository.search_by_name(session, name))


@router.get("/race/{race}", response_model=List[CharacterOut])
def characters_by_race(race: str, session: Session = Depends(get_session)) -> List[CharacterOut]:
    return _serialize_all(repository.find_by_race(session, race))


@router.get("/class/{character_class}", response_model=List[CharacterOut])
def characters_by_class(character_class: str, session: Session = Depends(get_session)) -> List[CharacterOut]:
    return _serialize_all(repository.find_by_class(session, character_class))


@router.get("/level/{level}", response_model=List[CharacterOut])
def characters_by_level(level: int, session: Session = Depends(get_session)) -> List[CharacterOut]:
    return _serialize_all(repository.find_by_level(session, level))


@router.post("/generate", response_model=CharacterOut, status_code=status.HTTP_201_CREATED)
def generate_random_character(
    session: Session = Depends(get_session),
    rng: random.Random = Depends(get_rng),
) -> CharacterOut:
    """Roll a random character and persist it."""
    saved = repository.save_character(session, generate_character(rng))
    logger.info("Generated character %s: %s the %s %s", saved.id, saved.name, saved.race, saved.character_class)
    return CharacterOut.from_character(saved)


@router.get("/{character_id}", response_model=CharacterOut, responses=NOT_FOUND)
def get_character(character_id: int, session: Session = Depends(get_session)) -> CharacterOut:
    return CharacterOut.from_character(repository.get_character(session, character_id))


@router.post("", response_model=CharacterOut, status_code=status.HTTP_201_CREATED, responses=REJECTED)
def create_character(payload: CharacterIn, session: Session = Depends(get_session)) -> CharacterOut:
    return CharacterOut.from_character(repository.save_character(session, payload.to_character()))


@router.put("/{character_id}", response_model=CharacterOut, responses={**NOT_FOUND, **REJECTED})
def update_character(
    character_id: int,
    payload: CharacterIn,
    session: Session = Depends(get_session),
) -> CharacterOut:
    """Full replace; omitted numeric fields fall back to their defaults."""
    updated = repository.update_character(session, character_id, payload.to_character())
    return CharacterOut.from_character(updated)


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_character(character_id: int, session: Session = Depends(get_session)) -> Response:
    repository.delete_character(session, character_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
