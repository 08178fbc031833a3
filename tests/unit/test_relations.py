import pytest

from goodfriends.schemas import PetRecord, QuoteRecord, RelatedRecord
from goodfriends.web.services import belongs_to, same_id, to_pet, to_quote

PARENT = "6f1c2a9e-0000-4000-8000-000000000001"
OTHER = "6f1c2a9e-0000-4000-8000-000000000002"


@pytest.mark.parametrize(
    "payload",
    [
        {"friendId": PARENT},
        {"friendIds": [OTHER, PARENT]},
        {"friends": [{"friendId": PARENT}]},
        {"friends": [{"id": PARENT}]},
    ],
)
def test_each_relation_shape_matches(payload):
    assert belongs_to(RelatedRecord.model_validate(payload), PARENT)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"friendId": None, "friendIds": None, "friends": None},
        {"friendId": OTHER},
        {"friendIds": [OTHER]},
        {"friendIds": []},
        {"friends": [{"friendId": OTHER}, {"id": OTHER}, {}]},
    ],
)
def test_no_matching_shape_is_false(payload):
    assert not belongs_to(RelatedRecord.model_validate(payload), PARENT)


def test_ids_compare_case_insensitively():
    record = RelatedRecord.model_validate({"friendIds": [PARENT.upper()]})
    assert belongs_to(record, f"  {PARENT} ")
    assert same_id(PARENT.upper(), PARENT)
    assert not same_id(None, PARENT)


def test_two_matching_shapes_still_true_and_record_untouched():
    record = RelatedRecord.model_validate(
        {"friendId": PARENT, "friends": [{"friendId": PARENT}]}
    )
    before = record.model_dump()
    assert belongs_to(record, PARENT)
    assert belongs_to(record, PARENT)
    assert record.model_dump() == before


def test_numeric_ids_are_compared_as_text():
    record = RelatedRecord.model_validate({"friendIds": [42], "friends": [{"id": 7}]})
    assert belongs_to(record, "42")
    assert belongs_to(record, "7")


def test_to_pet_prefers_pet_name_and_trims():
    record = PetRecord.model_validate(
        {"petId": "p1", "petName": "  Rex ", "name": "ignored", "kind": "Cat", "mood": 2,
         "strKind": " Cat ", "strMood": "Lazy "}
    )
    pet = to_pet(record)
    assert pet.name == "Rex"
    assert pet.kind == 1
    assert pet.mood == 2
    assert (pet.str_kind, pet.str_mood) == ("Cat", "Lazy")


def test_to_pet_falls_back_to_name_and_tolerates_nulls():
    record = PetRecord.model_validate(
        {"petId": "p2", "name": " Bella ", "kind": None, "mood": None, "strKind": None}
    )
    pet = to_pet(record)
    assert pet.name == "Bella"
    assert (pet.kind, pet.mood, pet.str_kind) == (0, 0, "")


def test_to_quote_trims_text_and_author():
    quote = to_quote(QuoteRecord.model_validate({"quoteId": "q1", "quoteText": "  Hi  ", "author": None}))
    assert (quote.quote_id, quote.text, quote.author) == ("q1", "Hi", "")
