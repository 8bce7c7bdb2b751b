"""In-place editing for FastAPI and SQLAlchemy server-rendered pages."""

__version__ = "0.1.0"
