import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from goodfriends.core.constants import (
    MAX_ADDRESS_FIELD_LENGTH,
    MAX_EMAIL_LENGTH,
    MAX_NAME_LENGTH,
    MAX_ZIP_CODE,
)
from goodfriends.schemas.base import CamelModel
from goodfriends.schemas.pets import PetItem, PetResponse
from goodfriends.schemas.quotes import QuoteItem, QuoteResponse

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Address(CamelModel):
    address_id: Optional[str] = None
    street_address: Optional[str] = None
    zip_code: int = 0
    city: Optional[str] = None
    country: Optional[str] = None

    @field_validator("zip_code", mode="before")
    @classmethod
    def _zip(cls, value):
        return 0 if value is None else value


class FriendListItem(CamelModel):
    friend_id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    seeded: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class FriendDetails(CamelModel):
    """Friend with its address and (once loaded) its pets and quotes; lists are never None."""

    friend_id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    birthday: Optional[datetime] = None
    address: Optional[Address] = None
    pets: list[PetItem] = Field(default_factory=list)
    quotes: list[QuoteItem] = Field(default_factory=list)

    @field_validator("pets", "quotes", mode="before")
    @classmethod
    def _relations(cls, value):
        return [] if value is None else value

    @field_validator("first_name", "last_name", "email", mode="before")
    @classmethod
    def _text(cls, value):
        return "" if value is None else value

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class FriendLocationItem(CamelModel):
    friend_id: str
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class AddressUpdateRequest(CamelModel):
    street_address: str = Field(default="", max_length=MAX_ADDRESS_FIELD_LENGTH)
    zip_code: int = Field(default=0, ge=0, le=MAX_ZIP_CODE)
    city: str = Field(default="", max_length=MAX_ADDRESS_FIELD_LENGTH)
    country: str = Field(default="", max_length=MAX_ADDRESS_FIELD_LENGTH)

    @field_validator("street_address", "city", "country", mode="before")
    @classmethod
    def _trim(cls, value):
        return (value or "").strip()


class FriendUpdateRequest(CamelModel):
    """Edit payload for a friend; a missing address leaves the stored one unchanged."""

    first_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    last_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    email: str = Field(min_length=1, max_length=MAX_EMAIL_LENGTH)
    birthday: Optional[datetime] = None
    address: Optional[AddressUpdateRequest] = None

    @field_validator("first_name", "last_name", "email", mode="before")
    @classmethod
    def _trim(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        if not EMAIL_REGEX.fullmatch(value):
            raise ValueError("The Email field is not a valid e-mail address.")
        return value


class FriendCreateRequest(FriendUpdateRequest):
    seeded: bool = False


class FriendResponse(CamelModel):
    """Backend friend item; relations are None in flat reads."""

    friend_id: str
    first_name: str
    last_name: str
    email: str
    birthday: Optional[datetime] = None
    seeded: bool = False
    address: Optional[Address] = None
    pets: Optional[list[PetResponse]] = None
    quotes: Optional[list[QuoteResponse]] = None
