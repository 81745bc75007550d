from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dnd_generator.character import DEFAULT_ABILITY_SCORE, DEFAULT_LEVEL, Character


class CharacterIn(BaseModel):
    """Create/update body; range rules are checked by the validation layer, not here.

    Numbers are strict so JSON booleans are not coerced into 1/0.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    race: Optional[str] = None
    character_class: Optional[str] = Field(default=None, alias="characterClass")
    level: int = Field(default=DEFAULT_LEVEL, strict=True)
    strength: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    dexterity: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    constitution: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    intelligence: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    wisdom: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    charisma: int = Field(default=DEFAULT_ABILITY_SCORE, strict=True)
    background: Optional[str] = Field(default=None, description="Free-text backstory")

    def to_character(self) -> Character:
        return Character(**self.model_dump(by_alias=False))


class CharacterOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    race: str
    character_class: str = Field(alias="characterClass")
    level: int
    strength: int
    dexterity: int
    constitution: int
    intelligence: int
    wisdom: int
    charisma: int
    background: Optional[str] = None
    modifiers: Dict[str, str] = Field(description="Formatted modifier per ability score")

    @classmethod
    def from_character(cls, character: Character) -> "CharacterOut":
        return cls(**character.to_dict(), modifiers=character.modifiers())


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    detail: List[FieldErrorOut]


class NotFoundResponse(BaseModel):
    detail: str


class OptionsResponse(BaseModel):
    races: List[str]
    classes: List[str]
