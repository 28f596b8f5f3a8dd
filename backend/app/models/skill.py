"""Skill ORM — no uniqueness on (name, category); duplicates are allowed."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import DEFAULT_PROFICIENCY
from app.db.base import Base


class SkillRecord(Base):
    __tablename__ = "skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    proficiency: Mapped[int | None] = mapped_column(
        Integer, nullable=True, default=DEFAULT_PROFICIENCY,
    )
