import pytest
from pydantic import ValidationError

from goodfriends.schemas import FriendUpdateRequest
from goodfriends.web.forms import (
    field_errors,
    field_key,
    merge_api_errors,
    sanitize_filter,
    validation_message,
)


@pytest.mark.parametrize(
    "raw, cleaned",
    [
        ("Ann", "Ann"),
        ("  Anna-Lena! ", "AnnaLena"),
        ("ann berg", "ann berg"),
        ("Åsa", "sa"),
        ("!!!", None),
        ("   ", None),
        (None, None),
    ],
)
def test_sanitize_filter(raw, cleaned):
    assert sanitize_filter(raw) == cleaned


@pytest.mark.parametrize(
    "name, key",
    [("Email", "email"), ("FirstName", "first_name"), ("Address.ZipCode", "address.zip_code"), ("$.Email", "email")],
)
def test_field_key(name, key):
    assert field_key(name) == key


def test_field_errors_from_model_validation():
    with pytest.raises(ValidationError) as info:
        FriendUpdateRequest(first_name="", last_name="Berg", email="nope")

    errors = field_errors(info.value)

    assert set(errors) == {"first_name", "email"}
    assert errors["email"] == ["The Email field is not a valid e-mail address."]


def test_merge_api_errors():
    merged = merge_api_errors({"Email": ["taken"], "Address.ZipCode": ["too big"], "": ["whole form"]})
    assert merged == {"email": ["taken"], "address.zip_code": ["too big"], "__all__": ["whole form"]}


def test_validation_message():
    message = validation_message("Pet validation failed", {"name": ["required"], "kind": ["bad", "worse"]})
    assert message == "Pet validation failed: name: required || kind: bad | worse"
