"""Wire models shared by the REST backend and the web client."""

from goodfriends.schemas.base import CamelModel
from goodfriends.schemas.pages import ResponsePage
from goodfriends.schemas.results import ApiResult, parse_validation_errors
from goodfriends.schemas.pets import (
    PetKind,
    PetMood,
    PetItem,
    PetCreateRequest,
    PetResponse,
)
from goodfriends.schemas.quotes import QuoteItem, QuoteCreateRequest, QuoteResponse
from goodfriends.schemas.friends import (
    Address,
    FriendListItem,
    FriendDetails,
    FriendLocationItem,
    AddressUpdateRequest,
    FriendUpdateRequest,
    FriendCreateRequest,
    FriendResponse,
)
from goodfriends.schemas.related import FriendRef, RelatedRecord, PetRecord, QuoteRecord
from goodfriends.schemas.overview import FriendsByCountry, FriendsByCountryCity, CityFriendsPets
from goodfriends.schemas.guest import DbInfo, FriendGroupInfo, GuestInfo

__all__ = [
    "CamelModel",
    "ResponsePage",
    "ApiResult",
    "parse_validation_errors",
    "PetKind",
    "PetMood",
    "PetItem",
    "PetCreateRequest",
    "PetResponse",
    "QuoteItem",
    "QuoteCreateRequest",
    "QuoteResponse",
    "Address",
    "FriendListItem",
    "FriendDetails",
    "FriendLocationItem",
    "AddressUpdateRequest",
    "FriendUpdateRequest",
    "FriendCreateRequest",
    "FriendResponse",
    "FriendRef",
    "RelatedRecord",
    "PetRecord",
    "QuoteRecord",
    "FriendsByCountry",
    "FriendsByCountryCity",
    "CityFriendsPets",
    "DbInfo",
    "FriendGroupInfo",
    "GuestInfo",
]
