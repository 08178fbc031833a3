"""Seeded test data: friends with addresses, pets and shared quotes.

Everything it writes carries ``seeded=True`` so it can be removed again
without touching user-created rows.
"""

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from goodfriends.api.db.models import Address, Friend, Pet, Quote
from goodfriends.schemas import PetKind, PetMood

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "Alex", "Anna", "Bertil", "Cecilia", "Daniel", "Elin", "Erik", "Frida",
    "Gustav", "Hanna", "Isak", "Johanna", "Karl", "Lina", "Magnus", "Nora",
    "Oskar", "Petra", "Rasmus", "Sara", "Tove", "Ulf", "Vera", "William",
]

LAST_NAMES = [
    "Andersson", "Berg", "Carlsson", "Dahl", "Ek", "Forsberg", "Gustafsson",
    "Holm", "Isaksson", "Johansson", "Karlsson", "Lind", "Nilsson", "Olsson",
    "Persson", "Svensson", "Wallin", "Hansen", "Larsen", "Virtanen",
]

PET_NAMES = [
    "Bella", "Charlie", "Daisy", "Fluffy", "Kitty", "Lady", "Max", "Milo",
    "Molly", "Oscar", "Pelle", "Rocky", "Simba", "Smulan", "Tiger", "Zorro",
]

EMAIL_DOMAINS = ["mail.com", "example.org", "friends.net", "inbox.se"]

# country -> (cities, streets)
ADDRESSES = {
    "Sweden": (
        ["Stockholm", "Göteborg", "Malmö", "Uppsala", "Gävle"],
        ["Storgatan", "Drottninggatan", "Kungsgatan", "Vasagatan"],
    ),
    "Norway": (
        ["Oslo", "Bergen", "Trondheim"],
        ["Karl Johans gate", "Bryggen", "Munkegata"],
    ),
    "Denmark": (
        ["Copenhagen", "Aarhus", "Odense"],
        ["Strøget", "Nyhavn", "Vesterbrogade"],
    ),
    "Finland": (
        ["Helsinki", "Espoo", "Tampere", "Turku"],
        ["Mannerheimintie", "Aleksanterinkatu", "Hämeenkatu"],
    ),
}

QUOTES = [
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("Life is what happens when you're busy making other plans.", "John Lennon"),
    ("In the middle of difficulty lies opportunity.", "Albert Einstein"),
    ("It always seems impossible until it's done.", "Nelson Mandela"),
    ("A friend is someone who knows all about you and still loves you.", "Elbert Hubbard"),
    ("Be yourself; everyone else is already taken.", "Oscar Wilde"),
    ("Whatever you are, be a good one.", "Abraham Lincoln"),
    ("Do what you can, with what you have, where you are.", "Theodore Roosevelt"),
    ("The best time to plant a tree was 20 years ago. The second best time is now.", "Chinese proverb"),
    ("Well done is better than well said.", "Benjamin Franklin"),
    ("Simplicity is the ultimate sophistication.", "Leonardo da Vinci"),
    ("Happiness depends upon ourselves.", "Aristotle"),
    ("Until you make the unconscious conscious, it will direct your life.", "Carl Jung"),
    ("The journey of a thousand miles begins with one step.", "Lao Tzu"),
    ("We become what we think about.", "Earl Nightingale"),
    ("Friendship is born at the moment when one person says to another: What! You too?", "C.S. Lewis"),
    ("Not all those who wander are lost.", "J.R.R. Tolkien"),
    ("Turn your wounds into wisdom.", "Oprah Winfrey"),
    ("An unexamined life is not worth living.", "Socrates"),
    ("Everything you can imagine is real.", "Pablo Picasso"),
]

MAX_PETS = 3
MAX_QUOTES = 5


@dataclass
class SeedAddress:
    street_address: str
    zip_code: int
    city: str
    country: str


@dataclass
class SeedPet:
    name: str
    kind: PetKind
    mood: PetMood


@dataclass
class SeedFriend:
    first_name: str
    last_name: str
    email: str
    birthday: Optional[datetime] = None
    address: Optional[SeedAddress] = None
    pets: list[SeedPet] = field(default_factory=list)
    # Indexes into QUOTES; the same quote row is shared by every friend that picks it
    quotes: list[int] = field(default_factory=list)


class SeedGenerator:
    """Random but reproducible friend data; pass a seeded ``random.Random`` for repeatable output."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def address(self) -> SeedAddress:
        country = self.rng.choice(sorted(ADDRESSES))
        cities, streets = ADDRESSES[country]
        return SeedAddress(
            street_address=f"{self.rng.choice(streets)} {self.rng.randint(1, 99)}",
            zip_code=self.rng.randint(10000, 99999),
            city=self.rng.choice(cities),
            country=country,
        )

    def birthday(self) -> datetime:
        year = self.rng.randint(1950, 2005)
        month = self.rng.randint(1, 12)
        day = self.rng.randint(1, 28)
        return datetime(year, month, day, tzinfo=timezone.utc)

    def pet(self) -> SeedPet:
        return SeedPet(
            name=self.rng.choice(PET_NAMES),
            kind=self.rng.choice(list(PetKind)),
            mood=self.rng.choice(list(PetMood)),
        )

    def email(self, first: str, last: str) -> str:
        number = self.rng.randint(1, 9999)
        return f"{first}.{last}{number}@{self.rng.choice(EMAIL_DOMAINS)}".lower()

    def friend(self) -> SeedFriend:
        first = self.rng.choice(FIRST_NAMES)
        last = self.rng.choice(LAST_NAMES)
        return SeedFriend(
            first_name=first,
            last_name=last,
            email=self.email(first, last),
            birthday=self.birthday() if self.rng.random() < 0.5 else None,
            address=self.address() if self.rng.random() < 0.8 else None,
            pets=[self.pet() for _ in range(self.rng.randint(0, MAX_PETS))],
            quotes=sorted(self.rng.sample(range(len(QUOTES)), self.rng.randint(0, MAX_QUOTES))),
        )

    def friends(self, count: int) -> list[SeedFriend]:
        """``count`` friends with pairwise distinct emails."""
        plans: list[SeedFriend] = []
        emails: set[str] = set()
        for _ in range(count):
            plan = self.friend()
            while plan.email in emails:
                plan.email = self.email(plan.first_name, plan.last_name)
            emails.add(plan.email)
            plans.append(plan)
        return plans


async def seed(db: AsyncSession, count: int, rng: random.Random | None = None) -> int:
    """Persist ``count`` seeded friends. Returns the number created."""
    plans = SeedGenerator(rng).friends(count)

    # Reuse seeded quote rows already in the database so quotes stay shared across runs
    existing = await db.execute(select(Quote).where(Quote.seeded.is_(True)))
    quote_rows = {(q.quote_text, q.author): q for q in existing.scalars().all()}

    def quote_row(index: int) -> Quote:
        text, author = QUOTES[index]
        row = quote_rows.get((text, author))
        if row is None:
            row = Quote(quote_text=text, author=author, seeded=True)
            row.friends = []
            quote_rows[(text, author)] = row
        return row

    for plan in plans:
        friend = Friend(
            first_name=plan.first_name,
            last_name=plan.last_name,
            email=plan.email,
            birthday=plan.birthday,
            seeded=True,
        )
        if plan.address:
            friend.address = Address(
                street_address=plan.address.street_address,
                zip_code=plan.address.zip_code,
                city=plan.address.city,
                country=plan.address.country,
                seeded=True,
            )
        friend.pets = [
            Pet(name=p.name, kind=int(p.kind), mood=int(p.mood), seeded=True) for p in plan.pets
        ]
        friend.quotes = [quote_row(i) for i in plan.quotes]
        db.add(friend)

    await db.flush()
    logger.info("Seeded %d friends", len(plans))
    return len(plans)


async def remove_seed(db: AsyncSession, seeded: bool = True) -> None:
    """Delete every row whose ``seeded`` flag equals ``seeded``."""
    await db.execute(delete(Pet).where(Pet.seeded == seeded))
    await db.execute(delete(Friend).where(Friend.seeded == seeded))
    await db.execute(delete(Quote).where(Quote.seeded == seeded))
    await db.execute(delete(Address).where(Address.seeded == seeded))
    logger.info("Removed rows with seeded=%s", seeded)


class SeedService:
    seed = staticmethod(seed)
    remove_seed = staticmethod(remove_seed)


seed_service = SeedService()
