import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    String,
    Boolean,
    Integer,
    DateTime,
    ForeignKey,
    Index,
    Table,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from .session import Base


def uuid4_str():
    return str(uuid.uuid4())


# Quotes are shared between friends
friend_quotes = Table(
    "friend_quotes",
    Base.metadata,
    Column("friend_id", UUID(as_uuid=False), ForeignKey("friends.id", ondelete="CASCADE"), primary_key=True),
    Column("quote_id", UUID(as_uuid=False), ForeignKey("quotes.id", ondelete="CASCADE"), primary_key=True),
)


class Address(Base):
    __tablename__ = "addresses"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    street_address = Column(String(100), nullable=False, default="")
    zip_code = Column(Integer, nullable=False, default=0)
    city = Column(String(100), nullable=False, default="")
    country = Column(String(100), nullable=False, default="")
    seeded = Column(Boolean, nullable=False, default=False)

    friends = relationship("Friend", back_populates="address")


class Friend(Base):
    __tablename__ = "friends"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(200), nullable=False, index=True)
    birthday = Column(DateTime(timezone=True), nullable=True)
    seeded = Column(Boolean, nullable=False, default=False)
    address_id = Column(UUID(as_uuid=False), ForeignKey("addresses.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=lambda: datetime.now(timezone.utc))

    address = relationship("Address", back_populates="friends")
    pets = relationship("Pet", back_populates="friend", cascade="all, delete-orphan", passive_deletes=True)
    quotes = relationship("Quote", secondary=friend_quotes, back_populates="friends", passive_deletes=True)

    __table_args__ = (Index("ix_friends_seeded_name", "seeded", "last_name", "first_name"),)


class Pet(Base):
    __tablename__ = "pets"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    name = Column(String(50), nullable=False)
    kind = Column(Integer, nullable=False, default=0)  # PetKind
    mood = Column(Integer, nullable=False, default=0)  # PetMood
    seeded = Column(Boolean, nullable=False, default=False)
    friend_id = Column(UUID(as_uuid=False), ForeignKey("friends.id", ondelete="CASCADE"), nullable=True, index=True)

    friend = relationship("Friend", back_populates="pets")


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(UUID(as_uuid=False), primary_key=True, default=uuid4_str)
    quote_text = Column(String(300), nullable=False)
    author = Column(String(100), nullable=False)
    seeded = Column(Boolean, nullable=False, default=False)

    friends = relationship("Friend", secondary=friend_quotes, back_populates="quotes", passive_deletes=True)
