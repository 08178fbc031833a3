from typing import Optional

from pydantic import Field, field_validator, model_validator

from goodfriends.core.constants import MAX_QUOTE_AUTHOR_LENGTH, MAX_QUOTE_TEXT_LENGTH
from goodfriends.schemas.base import CamelModel


class QuoteItem(CamelModel):
    """Normalized quote as rendered by the web client."""

    quote_id: str
    text: str = Field(default="", alias="quoteText")
    author: str = ""


class QuoteCreateRequest(CamelModel):
    """Quote create payload; the owning friend(s) come as ``friendIds`` or a single ``friendId``."""

    quote_text: str = Field(min_length=1, max_length=MAX_QUOTE_TEXT_LENGTH)
    author: str = Field(min_length=1, max_length=MAX_QUOTE_AUTHOR_LENGTH)
    friend_ids: Optional[list[str]] = None
    friend_id: Optional[str] = None

    @field_validator("quote_text", "author")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @model_validator(mode="after")
    def _owner_ids(self):
        if self.friend_id and not self.friend_ids:
            self.friend_ids = [self.friend_id]
        return self


class QuoteResponse(CamelModel):
    quote_id: str
    quote_text: str
    author: str
    seeded: bool = False
    friend_ids: list[str] = Field(default_factory=list)
