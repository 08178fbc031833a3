"""Friend relation membership and normalization for raw pet/quote records."""

from goodfriends.schemas import PetItem, PetRecord, QuoteItem, QuoteRecord, RelatedRecord


def same_id(candidate: str | None, parent_id: str) -> bool:
    """GUID text equality; the API may send ids in either letter case."""
    return candidate is not None and candidate.strip().lower() == parent_id.strip().lower()


def belongs_to(record: RelatedRecord, parent_id: str) -> bool:
    """True when any relation shape on record names parent_id.

    Shapes are OR-ed: single ``friendId``, ``friendIds`` list, then embedded
    ``friends`` references (``friendId`` or ``id``). No shape present -> False.
    """
    if same_id(record.friend_id, parent_id):
        return True
    if record.friend_ids and any(same_id(fid, parent_id) for fid in record.friend_ids):
        return True
    if record.friends and any(
        same_id(ref.friend_id, parent_id) or same_id(ref.id, parent_id)
        for ref in record.friends
    ):
        return True
    return False


def _text(value: str | None) -> str:
    return (value or "").strip()


def to_pet(record: PetRecord) -> PetItem:
    return PetItem(
        pet_id=record.pet_id,
        name=_text(record.pet_name if record.pet_name is not None else record.name),
        kind=record.kind,
        mood=record.mood,
        str_kind=_text(record.str_kind),
        str_mood=_text(record.str_mood),
    )


def to_quote(record: QuoteRecord) -> QuoteItem:
    return QuoteItem(
        quote_id=record.quote_id,
        text=_text(record.quote_text),
        author=_text(record.author),
    )
