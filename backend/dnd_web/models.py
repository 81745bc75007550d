from typing import Optional

from sqlmodel import Field, SQLModel


class CharacterRow(SQLModel, table=True):
    __tablename__ = "characters"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, index=True)
    race: str = Field(nullable=False, index=True)
    character_class: str = Field(nullable=False, index=True)
    level: int = Field(default=1, nullable=False)
    strength: int = Field(default=10)
    dexterity: int = Field(default=10)
    constitution: int = Field(default=10)
    intelligence: int = Field(default=10)
    wisdom: int = Field(default=10)
    charisma: int = Field(default=10)
    background: Optional[str] = Field(default=None)
