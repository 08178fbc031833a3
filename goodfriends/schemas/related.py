"""Raw related records (pets, quotes) as the backend may send them.

The friend relation can arrive in any combination of three shapes: a single
``friendId``, a ``friendIds`` list, or a ``friends`` list of embedded
references exposing ``friendId`` or ``id``. Every shape is optional.
"""

from typing import Optional

from pydantic import field_validator

from goodfriends.schemas.base import CamelModel
from goodfriends.schemas.pets import PetKind, PetMood, enum_value


def _id_text(value):
    return None if value is None else str(value)


class FriendRef(CamelModel):
    friend_id: Optional[str] = None
    id: Optional[str] = None

    @field_validator("friend_id", "id", mode="before")
    @classmethod
    def _ids(cls, value):
        return _id_text(value)


class RelatedRecord(CamelModel):
    friend_id: Optional[str] = None
    friend_ids: Optional[list[str]] = None
    friends: Optional[list[FriendRef]] = None

    @field_validator("friend_id", mode="before")
    @classmethod
    def _friend_id(cls, value):
        return _id_text(value)

    @field_validator("friend_ids", mode="before")
    @classmethod
    def _friend_ids(cls, value):
        if value is None:
            return None
        return [str(v) for v in value if v is not None]


class PetRecord(RelatedRecord):
    pet_id: str
    pet_name: Optional[str] = None
    name: Optional[str] = None
    kind: int = 0
    mood: int = 0
    str_kind: Optional[str] = None
    str_mood: Optional[str] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _kind(cls, value):
        return 0 if value is None else enum_value(PetKind, value)

    @field_validator("mood", mode="before")
    @classmethod
    def _mood(cls, value):
        return 0 if value is None else enum_value(PetMood, value)


class QuoteRecord(RelatedRecord):
    quote_id: str
    quote_text: Optional[str] = None
    author: Optional[str] = None
