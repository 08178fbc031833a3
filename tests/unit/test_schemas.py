import pytest
from pydantic import ValidationError

from goodfriends.schemas import (
    FriendDetails,
    FriendListItem,
    FriendUpdateRequest,
    PetCreateRequest,
    PetKind,
    QuoteCreateRequest,
    ResponsePage,
)


@pytest.mark.parametrize(
    "total, size, pages",
    [(101, 50, 3), (100, 50, 2), (0, 50, 0), (1, 1, 1), (101, 0, 0), (5, -1, 0)],
)
def test_total_pages(total, size, pages):
    assert ResponsePage[FriendListItem](total_count=total, page_size=size).total_pages == pages


def test_page_accepts_items_or_page_items():
    a = ResponsePage[FriendListItem].model_validate({"pageItems": [{"friendId": "a"}], "totalCount": 1})
    b = ResponsePage[FriendListItem].model_validate({"items": [{"friendId": "b"}]})
    c = ResponsePage[FriendListItem].model_validate({"pageItems": None})
    assert [f.friend_id for f in a.items] == ["a"]
    assert [f.friend_id for f in b.items] == ["b"]
    assert c.items == []


def test_page_serializes_with_camel_case_keys():
    wire = ResponsePage[FriendListItem](page_items=[], page_nr=1, page_size=10, total_count=3).to_wire()
    assert wire == {"pageItems": [], "pageNr": 1, "pageSize": 10, "totalCount": 3}


def test_friend_details_null_relations_become_empty():
    friend = FriendDetails.model_validate(
        {"friendId": "f", "firstName": None, "lastName": "Berg", "pets": None, "quotes": None,
         "address": {"city": "Oslo", "zipCode": None}}
    )
    assert friend.pets == [] and friend.quotes == []
    assert friend.name == "Berg"
    assert friend.address.zip_code == 0


def test_friend_update_rejects_bad_email():
    with pytest.raises(ValidationError) as info:
        FriendUpdateRequest(first_name="A", last_name="B", email="not-an-email")
    assert "The Email field is not a valid e-mail address." in str(info.value)


def test_friend_update_rejects_zip_out_of_range():
    with pytest.raises(ValidationError):
        FriendUpdateRequest(
            first_name="A", last_name="B", email="a@b.se", address={"zipCode": 100000}
        )


def test_pet_create_accepts_names_and_numbers():
    pet = PetCreateRequest(name=" Rex ", kind="cat", mood="3")
    assert pet.name == "Rex"
    assert pet.kind is PetKind.CAT
    assert int(pet.mood) == 3
    with pytest.raises(ValidationError):
        PetCreateRequest(name="Rex", kind="dragon")
    with pytest.raises(ValidationError):
        PetCreateRequest(name="   ")


def test_quote_create_single_friend_id_fills_list():
    quote = QuoteCreateRequest.model_validate({"quoteText": "Hi", "author": "Me", "friendId": "F1"})
    assert quote.friend_ids == ["F1"]
    with pytest.raises(ValidationError):
        QuoteCreateRequest(quote_text="  ", author="Me")
