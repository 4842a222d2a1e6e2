"""create catalog tables

Revision ID: 3c1e9a7d2b10
Revises:
Create Date: 2025-09-02 10:14:03.118204+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1e9a7d2b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("seq", sa.Integer(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "categories",
        *_entity_columns(),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_table("genres", *_entity_columns())
    op.create_table(
        "cast_members",
        *_entity_columns(),
        sa.Column("type", sa.Enum("director", "actor", name="cast_member_type"), nullable=False),
    )
    op.create_table(
        "videos",
        *_entity_columns(),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("year_launched", sa.Integer(), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("opened", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "rating",
            sa.Enum("ER", "L", "AGE_10", "AGE_12", "AGE_14", "AGE_16", "AGE_18", name="video_rating"),
            nullable=False,
        ),
    )
    for table in ("categories", "genres", "cast_members", "videos"):
        op.create_index(f"ix_{table}_name", table, ["name"])
        op.create_index(f"ix_{table}_seq", table, ["seq"])


def downgrade() -> None:
    for table in ("videos", "cast_members", "genres", "categories"):
        op.drop_index(f"ix_{table}_seq", table_name=table)
        op.drop_index(f"ix_{table}_name", table_name=table)
        op.drop_table(table)
    sa.Enum(name="video_rating").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="cast_member_type").drop(op.get_bind(), checkfirst=True)
