"""create person table

Revision ID: 3f1c2a9d7e40
Revises:
Create Date: 2026-10-17 19:20:00.000000

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e40"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "person",
        sa.Column(
            "id",
            sa.BigInteger(),
            autoincrement=False,
            nullable=False,
            comment="Caller-supplied person identifier (registration key).",
        ),
        sa.Column(
            "name",
            sa.String(length=200),
            nullable=False,
            comment="Display name; not unique.",
        ),
        sa.Column(
            "age",
            sa.Integer(),
            nullable=False,
            comment="Age in years at registration time.",
        ),
        sa.Column(
            "gender",
            sa.String(length=16),
            nullable=False,
            comment="Gender enum member name (e.g. 'FEMALE').",
        ),
        sa.Column(
            "alive",
            sa.Boolean(),
            nullable=False,
            comment="Alive flag at registration time.",
        ),
        sa.Column(
            "registered_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Server-assigned registration timestamp.",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_person")),
        comment="Registered voters. One row per accepted registration.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("person")
