"""ORM Models — SQLAlchemy declarative models for the three portfolio entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are independent: no foreign keys between tables

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from app.models.project import ProjectRecord  # noqa: F401
from app.models.skill import SkillRecord  # noqa: F401
from app.models.message import MessageRecord  # noqa: F401
