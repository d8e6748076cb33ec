"""Database plumbing shared by SQLAlchemy-backed adapters."""
