"""Relational Storage — PortfolioStorage backed by SQLAlchemy async ORM.

Invariants:
    - Projects listed by id descending; skills by (category, name) ascending
    - tech_stack encoded to JSON text on write; decoded (never failing) on read
    - get_project() returns None for unknown, non-positive or non-integer ids
    - All DB failures arrive as StorageUnavailableError via DatabaseSessionManager
    - health_check() is False when the tables are missing, not only when the DB is down
"""

import logging

from sqlalchemy import select

from app.core.domain_types import parse_entity_id
from app.core.errors import StorageUnavailableError
from app.core.tech_stack import encode_tech_stack
from app.infrastructure.database import DatabaseSessionManager
from app.models.message import MessageRecord
from app.models.project import ProjectRecord
from app.models.skill import SkillRecord
from app.schemas.message import InsertMessage, Message
from app.schemas.project import InsertProject, Project
from app.schemas.skill import InsertSkill, Skill

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """PortfolioStorage over a relational database."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    # ─── Projects ───────────────────────────────────────────────

    async def list_projects(self) -> list[Project]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ProjectRecord).order_by(ProjectRecord.id.desc()),
            )
            return [Project.model_validate(r) for r in result.scalars().all()]

    async def get_project(self, project_id: int | str) -> Project | None:
        pid = parse_entity_id(project_id)
        if pid is None:
            return None
        async with self._db.session() as db:
            record = await db.get(ProjectRecord, pid)
            return Project.model_validate(record) if record else None

    async def create_project(self, data: InsertProject) -> Project:
        record = ProjectRecord(
            title=data.title,
            short_description=data.short_description,
            problem_statement=data.problem_statement,
            methodology=data.methodology,
            outcome=data.outcome,
            tech_stack=encode_tech_stack(data.tech_stack),
            github_url=data.github_url,
            demo_url=data.demo_url,
            image_url=data.image_url,
        )
        async with self._db.session() as db:
            db.add(record)
            await db.commit()
            await db.refresh(record)
        logger.info(
            f"Project created: {record.title}",
            extra={"entity": "Project", "entity_id": record.id},
        )
        return Project.model_validate(record)

    # ─── Skills ─────────────────────────────────────────────────

    async def list_skills(self) -> list[Skill]:
        async with self._db.session() as db:
            result = await db.execute(
                select(SkillRecord).order_by(
                    SkillRecord.category.asc(), SkillRecord.name.asc(),
                ),
            )
            return [Skill.model_validate(r) for r in result.scalars().all()]

    async def create_skill(self, data: InsertSkill) -> Skill:
        record = SkillRecord(
            name=data.name,
            category=data.category,
            proficiency=data.proficiency,
        )
        async with self._db.session() as db:
            db.add(record)
            await db.commit()
            await db.refresh(record)
        return Skill.model_validate(record)

    # ─── Messages ───────────────────────────────────────────────

    async def create_message(self, data: InsertMessage) -> Message:
        record = MessageRecord(
            name=data.name, email=data.email, message=data.message,
        )
        async with self._db.session() as db:
            db.add(record)
            await db.commit()
            await db.refresh(record)
        logger.info(
            "Contact message stored",
            extra={"entity": "Message", "entity_id": record.id},
        )
        return Message.model_validate(record)

    async def list_messages(self) -> list[Message]:
        async with self._db.session() as db:
            result = await db.execute(
                select(MessageRecord).order_by(MessageRecord.id.desc()),
            )
            return [Message.model_validate(r) for r in result.scalars().all()]

    async def health_check(self) -> bool:
        """Ready only when the database answers and the portfolio schema exists."""
        if not await self._db.health_check():
            return False
        try:
            async with self._db.session() as db:
                await db.execute(select(ProjectRecord.id).limit(1))
        except StorageUnavailableError as e:
            logger.error(f"Portfolio schema check failed: {e}")
            return False
        return True
