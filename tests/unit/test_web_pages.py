import json

import httpx

from tests.conftest import page

FRIENDS = "/api/Friends/Read"


def _friend(friend_id="F1"):
    return {
        "friendId": friend_id,
        "firstName": "Ann",
        "lastName": "Berg",
        "email": "ann@x.se",
        "address": {"streetAddress": "Storgatan 1", "zipCode": 12345, "city": "Uppsala", "country": "Sweden"},
    }


def _with_friend(fake_api, pets=None, quotes=None):
    fake_api.on("GET", FRIENDS, lambda r: page([_friend()]))
    fake_api.on("GET", "/api/Pets/Read", pets or (lambda r: page([])))
    fake_api.on("GET", "/api/Quotes/Read", quotes or (lambda r: page([])))


def test_home_shows_api_error(fake_api, web_client):
    fake_api.on("GET", "/api/Guest/Info", lambda r: httpx.Response(500, text="db down"))

    response = web_client.get("/")

    assert response.status_code == 200
    assert "API ERROR: HTTP 500" in response.text


def test_home_shows_counts(fake_api, web_client):
    fake_api.on(
        "GET",
        "/api/Guest/Info",
        lambda r: {"db": {"nrSeededFriends": 42}, "friends": [{"country": "Sweden", "city": "-", "nrFriends": 3}]},
    )

    response = web_client.get("/")

    assert "Seeded friends: 42" in response.text
    assert "Sweden" in response.text


def test_friends_index_sanitizes_search(fake_api, web_client):
    fake_api.on("GET", FRIENDS, lambda r: page([_friend()], total=1, page_size=50))

    response = web_client.get("/friends", params={"q": "Ann!"})

    assert response.status_code == 200
    assert "Ann Berg" in response.text
    assert fake_api.calls(FRIENDS)[0].url.params["filter"] == "Ann"


def test_details_page_uses_fallback_scan(fake_api, web_client):
    def pets(request):
        if "friendId" in request.url.params:
            return page([])
        return page(
            [
                {"petId": "p1", "petName": "Rex", "kind": 0, "mood": 0, "strKind": "Dog", "strMood": "Happy", "friendIds": ["f1"]},
                {"petId": "p2", "petName": "Stranger", "kind": 0, "mood": 0, "friendId": "F9"},
            ]
        )

    _with_friend(fake_api, pets=pets)

    response = web_client.get("/friends/F1", params={"seeded": "false"})

    assert response.status_code == 200
    assert "Rex" in response.text
    assert "Stranger" not in response.text
    assert {r.url.params["seeded"] for r in fake_api.requests} == {"false"}


def test_details_page_partial_failure_still_renders(fake_api, web_client):
    _with_friend(
        fake_api,
        quotes=lambda r: httpx.Response(500, text="quotes down"),
    )

    response = web_client.get("/friends/F1")

    assert response.status_code == 200
    assert "Ann Berg" in response.text
    assert "Could not load quotes: HTTP 500" in response.text


def test_details_page_not_found(fake_api, web_client):
    fake_api.on("GET", FRIENDS, lambda r: page([]))

    response = web_client.get("/friends/nobody")

    assert response.status_code == 404
    assert "Friend not found for id=nobody" in response.text


def test_add_quote_redirects_with_flash(fake_api, web_client):
    fake_api.on("POST", "/api/Quotes/CreateItem", lambda r: {"quoteId": "q1"})

    response = web_client.post(
        "/friends/F1/quotes?seeded=false",
        data={"text": "Hi", "author": "Me"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    location = response.headers["location"]
    assert "/friends/F1" in location
    assert "seeded=false" in location
    assert "flash=Quote+added." in location


def test_add_pet_invalid_rerenders_with_message(fake_api, web_client):
    _with_friend(fake_api)

    response = web_client.post("/friends/F1/pets", data={"name": "  ", "kind": "0", "mood": "0"})

    assert response.status_code == 400
    assert "Pet validation failed" in response.text
    assert fake_api.calls("/api/Pets/CreateItem", "POST") == []


def test_add_pet_sends_owner(fake_api, web_client):
    fake_api.on("POST", "/api/Pets/CreateItem", lambda r: {"petId": "p1"})

    response = web_client.post(
        "/friends/F1/pets", data={"name": "Rex", "kind": "2", "mood": "Lazy"}, follow_redirects=False
    )

    assert response.status_code == 303
    body = json.loads(fake_api.calls("/api/Pets/CreateItem", "POST")[0].content)
    assert body == {"name": "Rex", "kind": 2, "mood": 2, "friendId": "F1"}


def test_delete_without_id_is_a_no_op(fake_api, web_client):
    response = web_client.post("/friends/F1/pets/%20/delete", follow_redirects=False)

    assert response.status_code == 303
    assert "Nothing+to+delete." in response.headers["location"]
    assert fake_api.requests == []


def test_delete_pet_uses_id_from_path(fake_api, web_client):
    fake_api.on("DELETE", "/api/Pets/DeleteItem/P1", lambda r: httpx.Response(204))

    response = web_client.post("/friends/F1/pets/P1/delete?seeded=false", follow_redirects=False)

    assert response.status_code == 303
    location = response.headers["location"]
    assert "/friends/F1" in location
    assert "seeded=false" in location
    assert "flash=Pet+deleted." in location
    assert len(fake_api.calls("/api/Pets/DeleteItem/P1", "DELETE")) == 1


def test_delete_quote_uses_id_from_path(fake_api, web_client):
    fake_api.on("DELETE", "/api/Quotes/DeleteItem/Q1", lambda r: httpx.Response(204))

    response = web_client.post("/friends/F1/quotes/Q1/delete", follow_redirects=False)

    assert response.status_code == 303
    assert "flash=Quote+deleted." in response.headers["location"]
    assert len(fake_api.calls("/api/Quotes/DeleteItem/Q1", "DELETE")) == 1


def test_edit_page_prefills_form(fake_api, web_client):
    _with_friend(fake_api)

    response = web_client.get("/friends/F1/edit")

    assert response.status_code == 200
    assert 'value="Storgatan 1"' in response.text
    assert 'value="12345"' in response.text


def test_edit_shows_api_validation_errors(fake_api, web_client):
    problem = {"title": "x", "status": 400, "errors": {"Email": ["Email is already in use."]}}
    fake_api.on("PUT", "/api/Friends/UpdateItem/F1", lambda r: httpx.Response(400, json=problem))

    response = web_client.post(
        "/friends/F1/edit",
        data={"first_name": "Ann", "last_name": "Berg", "email": "taken@x.se"},
    )

    assert response.status_code == 400
    assert "Email is already in use." in response.text


def test_edit_local_validation_skips_api(fake_api, web_client):
    response = web_client.post(
        "/friends/F1/edit",
        data={"first_name": "Ann", "last_name": "Berg", "email": "bad", "birthday": "not-a-date"},
    )

    assert response.status_code == 400
    assert "The Email field is not a valid e-mail address." in response.text
    assert "Birthday must be a date" in response.text
    assert fake_api.requests == []


def test_edit_success_sends_address_and_redirects(fake_api, web_client):
    fake_api.on("PUT", "/api/Friends/UpdateItem/F1", lambda r: httpx.Response(204))

    response = web_client.post(
        "/friends/F1/edit?seeded=true",
        data={
            "first_name": " Ann ",
            "last_name": "Berg",
            "email": "ann@x.se",
            "birthday": "1990-05-17",
            "has_address": "true",
            "street_address": " Storgatan 2 ",
            "zip_code": "75310",
            "city": "Uppsala",
            "country": "Sweden",
        },
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert "flash=Friend+updated." in response.headers["location"]
    body = json.loads(fake_api.calls("/api/Friends/UpdateItem/F1", "PUT")[0].content)
    assert body["firstName"] == "Ann"
    assert body["birthday"].startswith("1990-05-17")
    assert body["address"] == {
        "streetAddress": "Storgatan 2",
        "zipCode": 75310,
        "city": "Uppsala",
        "country": "Sweden",
    }


def test_overview_error_message(fake_api, web_client):
    fake_api.on("GET", "/api/overview/friends-by-country", lambda r: httpx.Response(500))

    response = web_client.get("/overview")

    assert "Could not load Overview data from API." in response.text


def test_friends_by_location_lists_matches(fake_api, web_client):
    fake_api.on(
        "GET",
        "/api/Friends/List",
        lambda r: [{"friendId": "F1", "firstName": "Ann", "lastName": "Berg", "country": "Sweden", "city": "Gävle"}],
    )

    response = web_client.get("/friends-by-location", params={"country": "Sweden"})

    assert "Ann Berg" in response.text
    assert fake_api.calls("/api/Friends/List")[0].url.params["country"] == "Sweden"
