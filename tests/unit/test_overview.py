from goodfriends.api.services.overview import (
    LocationRow,
    group_by_country,
    group_by_country_city,
    group_cities,
)

ROWS = [
    LocationRow("Sweden", "Uppsala", 2),
    LocationRow(" Sweden ", "Uppsala ", 1),
    LocationRow("Sweden", "", 0),
    LocationRow("Sweden", "Gävle", 3),
    LocationRow("Norway", "Oslo", 0),
    LocationRow("", "Nowhere", 5),
    LocationRow(None, None, 0),
]


def test_group_by_country():
    groups = group_by_country(ROWS)

    assert [(g.country, g.total_friends, g.cities) for g in groups] == [
        ("Sweden", 4, 2),
        ("Norway", 1, 1),
    ]


def test_group_by_country_city_uses_dash_for_blank_city():
    groups = group_by_country_city(ROWS)

    assert [(g.country, g.city, g.nr_friends) for g in groups] == [
        ("Norway", "Oslo", 1),
        ("Sweden", "Uppsala", 2),
        ("Sweden", "-", 1),
        ("Sweden", "Gävle", 1),
    ]


def test_group_cities_counts_pets():
    cities = group_cities(ROWS, " Sweden")

    assert [(c.city, c.friends_count, c.pets_count) for c in cities] == [
        ("-", 1, 0),
        ("Gävle", 1, 3),
        ("Uppsala", 2, 3),
    ]
    assert {c.country for c in cities} == {"Sweden"}


def test_group_cities_unknown_country():
    assert group_cities(ROWS, "Denmark") == []
