import httpx
import pytest

from goodfriends.web.providers import ApiError
from goodfriends.web.services import RelatedKind, fetch_related

from tests.conftest import page

QUOTES = "/api/Quotes/Read"
PETS = "/api/Pets/Read"


def _filtered(request: httpx.Request) -> bool:
    return "friendId" in request.url.params


async def test_filtered_hit_skips_broad_scan(fake_api, api):
    fake_api.on(
        "GET",
        PETS,
        lambda r: page([{"petId": "p1", "name": " Rex ", "kind": 0, "mood": 0, "friendId": "F1"}]),
    )

    pets = await fetch_related(api, "F1", RelatedKind.PETS, seeded=True)

    assert [p.name for p in pets] == ["Rex"]
    calls = fake_api.calls(PETS)
    assert len(calls) == 1
    assert calls[0].url.params["friendId"] == "F1"
    assert calls[0].url.params["pageSize"] == "200"
    assert calls[0].url.params["seeded"] == "true"


async def test_filtered_hit_is_trusted_without_client_side_filter(fake_api, api):
    # The server said these belong to F1; they are returned as-is even without relation fields
    fake_api.on("GET", QUOTES, lambda r: page([{"quoteId": "q1", "quoteText": "A", "author": "B"}]))

    quotes = await fetch_related(api, "F1", RelatedKind.QUOTES, seeded=False)

    assert [q.quote_id for q in quotes] == ["q1"]
    assert len(fake_api.calls(QUOTES)) == 1


async def test_empty_filtered_page_falls_back_to_one_broad_scan(fake_api, api):
    scan = [
        {"quoteId": "q1", "quoteText": "  First  ", "author": " Ann ", "friendIds": ["P1", "X"]},
        {"quoteId": "q2", "quoteText": "Second", "author": "Bo", "friendIds": ["X"]},
        {"quoteId": "q3", "quoteText": " Third", "author": "Cy ", "friendIds": ["p1"]},
    ]

    def respond(request):
        if _filtered(request):
            return page([], total=0)
        return page(scan)

    fake_api.on("GET", QUOTES, respond)

    quotes = await fetch_related(api, "P1", RelatedKind.QUOTES, seeded=True)

    assert [(q.quote_id, q.text, q.author) for q in quotes] == [
        ("q1", "First", "Ann"),
        ("q3", "Third", "Cy"),
    ]
    calls = fake_api.calls(QUOTES)
    assert len(calls) == 2
    assert calls[0].url.params["pageSize"] == "200"
    assert "friendId" not in calls[1].url.params
    assert calls[1].url.params["pageSize"] == "500"
    assert calls[1].url.params["seeded"] == "true"


async def test_pets_fall_back_too(fake_api, api):
    def respond(request):
        if _filtered(request):
            return page([])
        return page(
            [
                {"petId": "p1", "petName": "Mine", "kind": 1, "mood": 0, "friends": [{"id": "F1"}]},
                {"petId": "p2", "petName": "Theirs", "kind": 1, "mood": 0, "friendId": "F2"},
            ]
        )

    fake_api.on("GET", PETS, respond)

    pets = await fetch_related(api, "F1", RelatedKind.PETS, seeded=False)

    assert [p.pet_id for p in pets] == ["p1"]
    assert fake_api.calls(PETS)[1].url.params["seeded"] == "false"


async def test_empty_everywhere_is_an_empty_list(fake_api, api):
    fake_api.on("GET", PETS, lambda r: page([]))

    assert await fetch_related(api, "F1", RelatedKind.PETS, seeded=True) == []
    assert len(fake_api.calls(PETS)) == 2


async def test_filtered_failure_propagates_without_fallback(fake_api, api):
    fake_api.on("GET", QUOTES, lambda r: httpx.Response(500, text="boom"))

    with pytest.raises(ApiError) as info:
        await fetch_related(api, "F1", RelatedKind.QUOTES, seeded=True)

    assert info.value.status_code == 500
    assert len(fake_api.calls(QUOTES)) == 1


async def test_page_sizes_can_be_overridden(fake_api, api):
    fake_api.on("GET", PETS, lambda r: page([]))

    await fetch_related(api, "F1", RelatedKind.PETS, seeded=True, page_size=10, scan_page_size=20)

    sizes = [r.url.params["pageSize"] for r in fake_api.calls(PETS)]
    assert sizes == ["10", "20"]


async def test_explicit_zero_page_size_is_not_replaced_by_default(fake_api, api):
    fake_api.on("GET", PETS, lambda r: page([]))

    await fetch_related(api, "F1", RelatedKind.PETS, seeded=True, page_size=0, scan_page_size=0)

    sizes = [r.url.params["pageSize"] for r in fake_api.calls(PETS)]
    assert sizes == ["0", "0"]
