"""SQLAlchemy table definitions for linkbio.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

A user is stored as one row; links, socials, connections, pending requests
and circles are embedded JSONB documents, so every user mutation is a
single-row write.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("email", String(320), nullable=False, unique=True),  # Lower-cased
    Column("username", String(255), nullable=False, unique=True),  # "@name"
    Column("name", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("headline", Text, nullable=True),
    Column("profile_image", Text, nullable=False),
    Column("socials", JSONB, nullable=False, server_default="{}"),
    Column("links", JSONB, nullable=False, server_default="[]"),
    Column("circle_members", JSONB, nullable=False, server_default="[]"),
    Column("circle_requests", JSONB, nullable=False, server_default="[]"),
    Column("circles", JSONB, nullable=False, server_default="[]"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)
