from typing import Generic, TypeVar

from pydantic import AliasChoices, Field, field_validator

from goodfriends.schemas.base import CamelModel

T = TypeVar("T")


class ResponsePage(CamelModel, Generic[T]):
    """One page of items plus paging metadata.

    The backend names the item list ``pageItems``; ``items`` is accepted too.
    """

    page_items: list[T] = Field(
        default_factory=list,
        validation_alias=AliasChoices("pageItems", "items", "page_items"),
    )
    page_nr: int = 0
    page_size: int = 0
    total_count: int = 0

    @field_validator("page_items", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value

    @property
    def items(self) -> list[T]:
        return self.page_items

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total_count + self.page_size - 1) // self.page_size
