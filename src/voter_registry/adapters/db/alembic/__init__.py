"""Alembic migration scripts for VOTER REGISTRY."""
