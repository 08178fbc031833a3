import random
import re

from goodfriends.api.services.seed import ADDRESSES, MAX_PETS, MAX_QUOTES, QUOTES, SeedGenerator


def test_same_seed_same_friends():
    a = SeedGenerator(random.Random(42)).friends(25)
    b = SeedGenerator(random.Random(42)).friends(25)
    c = SeedGenerator(random.Random(43)).friends(25)

    assert a == b
    assert a != c


def test_generated_friends_are_well_formed():
    friends = SeedGenerator(random.Random(7)).friends(200)

    assert len(friends) == 200
    for friend in friends:
        local = re.escape(f"{friend.first_name}.{friend.last_name}".lower())
        assert re.match(rf"^{local}\d+@", friend.email)
        assert len(friend.pets) <= MAX_PETS
        assert len(friend.quotes) <= MAX_QUOTES
        assert len(set(friend.quotes)) == len(friend.quotes)
        assert all(0 <= i < len(QUOTES) for i in friend.quotes)
        if friend.address:
            cities, _ = ADDRESSES[friend.address.country]
            assert friend.address.city in cities
            assert 10000 <= friend.address.zip_code <= 99999

    assert any(f.address is None for f in friends)
    assert any(f.birthday is not None for f in friends)
    assert any(f.birthday is None for f in friends)


def test_quotes_are_shared_between_friends():
    friends = SeedGenerator(random.Random(1)).friends(50)
    picks = [i for f in friends for i in f.quotes]

    assert len(picks) > len(set(picks))


def test_emails_are_unique_within_a_run():
    friends = SeedGenerator(random.Random(3)).friends(2000)

    emails = [f.email for f in friends]
    assert len(set(emails)) == len(emails)
