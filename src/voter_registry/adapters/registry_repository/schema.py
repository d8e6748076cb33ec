"""Person registry schema.

Defines the ``person`` table used to persist registered voters. One row per
accepted registration, keyed by the person's identifier.

Constraints (enforced here):

| Constraint           | Purpose                                   |
|----------------------|-------------------------------------------|
| PRIMARY KEY(id)      | one registration per identifier           |

Eligibility (age, alive, non-negative id) is decided by the use case, not by
the schema.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Integer,
    String,
    Table,
    text,
)

from voter_registry.adapters.db.metadata import metadata

__all__ = ["person"]

person = Table(
    "person",
    metadata,
    Column(
        "id",
        BigInteger,
        primary_key=True,
        autoincrement=False,
        nullable=False,
        comment="Caller-supplied person identifier (registration key).",
    ),
    Column(
        "name",
        String(200),
        nullable=False,
        comment="Display name; not unique.",
    ),
    Column(
        "age",
        Integer,
        nullable=False,
        comment="Age in years at registration time.",
    ),
    Column(
        "gender",
        String(16),
        nullable=False,
        comment="Gender enum member name (e.g. 'FEMALE').",
    ),
    Column(
        "alive",
        Boolean,
        nullable=False,
        comment="Alive flag at registration time.",
    ),
    Column(
        "registered_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Server-assigned registration timestamp.",
    ),
    comment="Registered voters. One row per accepted registration.",
)
