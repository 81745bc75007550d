"""Server-rendered pages for browsing and editing characters."""

import logging
import random
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from dnd_generator.character import ABILITY_NAMES, Character
from dnd_generator.generator import CLASSES, RACES, generate_character
from dnd_generator.validation import CharacterValidationError
from dnd_web import repository
from dnd_web.core.config import get_settings
from dnd_web.db import get_rng, get_session

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], include_in_schema=False)
settings = get_settings()

NOTICES = {
    "created": "Character created successfully!",
    "updated": "Character updated successfully!",
    "deleted": "Character deleted successfully!",
    "generated": "Random character generated!",
    "not-found": "Character not found!",
}


def _form_int(raw: str) -> Any:
    """Blank -> None (required), unparsable text is kept so validation can flag it."""
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        return text


def character_form(
    name: str = Form(""),
    race: str = Form(""),
    character_class: str = Form("", alias="characterClass"),
    level: str = Form(""),
    strength: str = Form(""),
    dexterity: str = Form(""),
    constitution: str = Form(""),
    intelligence: str = Form(""),
    wisdom: str = Form(""),
    charisma: str = Form(""),
    background: str = Form(""),
) -> Character:
    """Bind posted form fields to a character without rejecting anything yet."""
    return Character(
        name=name,
        race=race,
        character_class=character_class,
        level=_form_int(level),
        strength=_form_int(strength),
        dexterity=_form_int(dexterity),
        constitution=_form_int(constitution),
        intelligence=_form_int(intelligence),
        wisdom=_form_int(wisdom),
        charisma=_form_int(charisma),
        background=background or None,
    )


def _parse_id(raw: str) -> int:
    """Page URLs with a non-numeric id are treated like a missing character."""
    if not (raw.isascii() and raw.isdigit()):
        raise repository.CharacterNotFoundError(raw)
    return int(raw)


def _redirect(url: str, notice: Optional[str] = None) -> RedirectResponse:
    if notice:
        url = f"{url}?notice={notice}"
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


def _render(request: Request, template: str, context: dict, status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    key = request.query_params.get("notice", "")
    base = {
        "app_name": settings.app_name,
        "notice": NOTICES.get(key),
        "notice_is_error": key == "not-found",
    }
    return templates.TemplateResponse(request, template, {**base, **context}, status_code=status_code)


def _render_form(
    request: Request,
    character: Character,
    *,
    page_title: str,
    action: str,
    errors=None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    error_map: dict[str, list[str]] = {}
    for error in errors or []:
        error_map.setdefault(error.field, []).append(error.message)
    return _render(
        request,
        "character_form.html",
        {
            "character": character,
            "races": RACES,
            "classes": CLASSES,
            "abilities": ABILITY_NAMES,
            "errors": error_map,
            "page_title": page_title,
            "action": action,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def home(request: Request, session: Session = Depends(get_session)) -> HTMLResponse:
    return _render(
        request,
        "index.html",
        {"characters": repository.list_characters(session), "page_title": settings.app_name},
    )


@router.get("/characters/new", response_class=HTMLResponse)
def new_character_form(request: Request) -> HTMLResponse:
    blank = Character(name="", race="", character_class="")
    return _render_form(request, blank, page_title="Create Character", action="/characters")


@router.post("/characters", response_class=HTMLResponse)
def create_character(
    request: Request,
    character: Character = Depends(character_form),
    session: Session = Depends(get_session),
):
    try:
        repository.save_character(session, character)
    except CharacterValidationError as exc:
        logger.info("Rejected character form: %s", exc)
        return _render_form(
            request,
            character,
            page_title="Create Character",
            action="/characters",
            errors=exc.errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return _redirect("/", "created")


@router.post("/characters/generate")
def generate_random_character(
    session: Session = Depends(get_session),
    rng: random.Random = Depends(get_rng),
) -> RedirectResponse:
    saved = repository.save_character(session, generate_character(rng))
    logger.info("Generated character %s from the web form", saved.id)
    return _redirect(f"/characters/{saved.id}", "generated")


@router.get("/characters/{character_id}", response_class=HTMLResponse)
def view_character(character_id: str, request: Request, session: Session = Depends(get_session)):
    try:
        character = repository.get_character(session, _parse_id(character_id))
    except repository.CharacterNotFoundError:
        return _redirect("/", "not-found")
    return _render(
        request,
        "character_detail.html",
        {"character": character, "modifiers": character.modifiers(), "abilities": ABILITY_NAMES, "page_title": character.name},
    )


@router.get("/characters/{character_id}/edit", response_class=HTMLResponse)
def edit_character_form(character_id: str, request: Request, session: Session = Depends(get_session)):
    try:
        character = repository.get_character(session, _parse_id(character_id))
    except repository.CharacterNotFoundError:
        return _redirect("/", "not-found")
    return _render_form(
        request,
        character,
        page_title=f"Edit {character.name}",
        action=f"/characters/{character_id}",
    )


@router.post("/characters/{character_id}", response_class=HTMLResponse)
def update_character(
    character_id: str,
    request: Request,
    character: Character = Depends(character_form),
    session: Session = Depends(get_session),
):
    try:
        repository.update_character(session, _parse_id(character_id), character)
    except repository.CharacterNotFoundError:
        return _redirect("/", "not-found")
    except CharacterValidationError as exc:
        logger.info("Rejected edit of character %s: %s", character_id, exc)
        return _render_form(
            request,
            character.with_id(int(character_id)),
            page_title="Edit Character",
            action=f"/characters/{character_id}",
            errors=exc.errors,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return _redirect(f"/characters/{character_id}", "updated")


@router.post("/characters/{character_id}/delete")
def delete_character(character_id: str, session: Session = Depends(get_session)) -> RedirectResponse:
    try:
        repository.delete_character(session, _parse_id(character_id))
    except repository.CharacterNotFoundError:
        return _redirect("/", "not-found")
    return _redirect("/", "deleted")
