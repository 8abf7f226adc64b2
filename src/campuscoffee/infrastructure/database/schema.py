"""SQLAlchemy Core table definitions for the campuscoffee database."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, MetaData, Table, Text

metadata = MetaData()

pos = Table(
    "pos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Column("name", Text, nullable=False, unique=True),
    Column("description", Text, nullable=False, default="", server_default=""),
    Column("type", Text, nullable=False),  # PosType
    Column("campus", Text, nullable=False),  # CampusType
    Column("street", Text, nullable=False),
    Column("house_number", Text, nullable=False),
    Column("postal_code", Integer, nullable=False),
    Column("city", Text, nullable=False),
)
