"""Shared model-to-response serializers."""

from goodfriends.api.db.models import Address, Friend, Pet, Quote
from goodfriends.schemas import (
    Address as AddressSchema,
    FriendLocationItem,
    FriendResponse,
    PetKind,
    PetMood,
    PetResponse,
    QuoteResponse,
)


def address_to_schema(address: Address | None) -> AddressSchema | None:
    if address is None:
        return None
    return AddressSchema(
        address_id=address.id,
        street_address=address.street_address,
        zip_code=address.zip_code or 0,
        city=address.city,
        country=address.country,
    )


def pet_to_response(pet: Pet) -> PetResponse:
    """Pet model to PetResponse; ``name`` and ``petName`` carry the same value."""
    return PetResponse(
        pet_id=pet.id,
        name=pet.name,
        pet_name=pet.name,
        kind=pet.kind,
        mood=pet.mood,
        str_kind=PetKind(pet.kind).label,
        str_mood=PetMood(pet.mood).label,
        seeded=pet.seeded,
        friend_id=pet.friend_id,
    )


def quote_to_response(quote: Quote) -> QuoteResponse:
    """Requires ``quote.friends`` to be loaded."""
    return QuoteResponse(
        quote_id=quote.id,
        quote_text=quote.quote_text,
        author=quote.author,
        seeded=quote.seeded,
        friend_ids=[f.id for f in quote.friends],
    )


def friend_to_response(friend: Friend, flat: bool = True) -> FriendResponse:
    """Friend model to FriendResponse. The address is always embedded; pets and quotes only when not flat."""
    return FriendResponse(
        friend_id=friend.id,
        first_name=friend.first_name,
        last_name=friend.last_name,
        email=friend.email,
        birthday=friend.birthday,
        seeded=friend.seeded,
        address=address_to_schema(friend.address),
        pets=None if flat else [pet_to_response(p) for p in friend.pets],
        quotes=None if flat else [quote_to_response(q) for q in friend.quotes],
    )


def friend_to_location_item(friend: Friend) -> FriendLocationItem:
    return FriendLocationItem(
        friend_id=friend.id,
        first_name=friend.first_name,
        last_name=friend.last_name,
        email=friend.email,
        country=friend.address.country if friend.address else None,
        city=friend.address.city if friend.address else None,
    )
