"""Database Infrastructure - SQLAlchemy Base shared by models and schema creation."""
