from enum import IntEnum
from typing import Optional

from pydantic import Field, field_validator

from goodfriends.core.constants import MAX_NAME_LENGTH
from goodfriends.schemas.base import CamelModel


class PetKind(IntEnum):
    DOG = 0
    CAT = 1
    RABBIT = 2
    FISH = 3
    BIRD = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class PetMood(IntEnum):
    HAPPY = 0
    HUNGRY = 1
    LAZY = 2
    SULKY = 3
    BUZY = 4
    SLEEPY = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


def enum_value(enum_cls: type[IntEnum], value) -> int:
    """Accept an enum member, its int value or its (case-insensitive) name."""
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        try:
            return int(enum_cls[text.upper()])
        except KeyError:
            raise ValueError(f"unknown {enum_cls.__name__}: {value}") from None
    return int(value)


class PetItem(CamelModel):
    """Normalized pet as rendered by the web client."""

    pet_id: str
    name: str = ""
    kind: int = 0
    mood: int = 0
    str_kind: str = ""
    str_mood: str = ""


class PetCreateRequest(CamelModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    kind: PetKind = PetKind.DOG
    mood: PetMood = PetMood.HAPPY
    friend_id: Optional[str] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _kind(cls, value):
        return enum_value(PetKind, value)

    @field_validator("mood", mode="before")
    @classmethod
    def _mood(cls, value):
        return enum_value(PetMood, value)

    @field_validator("name")
    @classmethod
    def _name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class PetResponse(CamelModel):
    """Backend pet item. ``name`` and ``petName`` carry the same value."""

    pet_id: str
    name: str
    pet_name: str
    kind: int
    mood: int
    str_kind: str
    str_mood: str
    seeded: bool = False
    friend_id: Optional[str] = None
