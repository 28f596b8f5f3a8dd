"""Database Declarations — SQLAlchemy declarative Base shared by models and Alembic.

Invariants:
    - Engines and sessions live in infrastructure/database.py, not here
"""
