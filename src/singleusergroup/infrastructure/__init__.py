"""Infrastructure adapters: SQLAlchemy account directory, visibility policy
and backend registration."""
