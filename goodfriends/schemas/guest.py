from pydantic import Field

from goodfriends.schemas.base import CamelModel


class DbInfo(CamelModel):
    nr_seeded_friends: int = 0
    nr_unseeded_friends: int = 0
    nr_friends_with_address: int = 0
    nr_seeded_pets: int = 0
    nr_seeded_quotes: int = 0


class FriendGroupInfo(CamelModel):
    country: str = ""
    city: str = ""
    nr_friends: int = 0


class GuestInfo(CamelModel):
    db: DbInfo = Field(default_factory=DbInfo)
    friends: list[FriendGroupInfo] = Field(default_factory=list)
