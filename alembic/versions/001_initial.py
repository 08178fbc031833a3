"""Initial schema: addresses, friends, pets, quotes and the friend/quote link table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "addresses",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("street_address", sa.String(100), nullable=False, server_default=""),
        sa.Column("zip_code", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("city", sa.String(100), nullable=False, server_default=""),
        sa.Column("country", sa.String(100), nullable=False, server_default=""),
        sa.Column("seeded", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "friends",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("first_name", sa.String(50), nullable=False),
        sa.Column("last_name", sa.String(50), nullable=False),
        sa.Column("email", sa.String(200), nullable=False),
        sa.Column("birthday", sa.DateTime(timezone=True), nullable=True),
        sa.Column("seeded", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("address_id", sa.UUID(), sa.ForeignKey("addresses.id", ondelete="SET NULL"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_friends_email", "friends", ["email"])
    op.create_index("ix_friends_seeded_name", "friends", ["seeded", "last_name", "first_name"])

    op.create_table(
        "pets",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("kind", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("mood", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("seeded", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("friend_id", sa.UUID(), sa.ForeignKey("friends.id", ondelete="CASCADE"), nullable=True),
    )
    op.create_index("ix_pets_friend_id", "pets", ["friend_id"])

    op.create_table(
        "quotes",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("quote_text", sa.String(300), nullable=False),
        sa.Column("author", sa.String(100), nullable=False),
        sa.Column("seeded", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "friend_quotes",
        sa.Column("friend_id", sa.UUID(), sa.ForeignKey("friends.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("quote_id", sa.UUID(), sa.ForeignKey("quotes.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("friend_quotes")
    op.drop_table("quotes")
    op.drop_index("ix_pets_friend_id", table_name="pets")
    op.drop_table("pets")
    op.drop_index("ix_friends_seeded_name", table_name="friends")
    op.drop_index("ix_friends_email", table_name="friends")
    op.drop_table("friends")
    op.drop_table("addresses")
