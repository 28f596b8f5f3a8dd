"""In-Memory Storage — PortfolioStorage held in process-local lists.

Same ordering, defaulting and not-found rules as DatabaseStorage; used for
tests and for running the API without a database (STORAGE_BACKEND=memory).
Returned objects are copies, so callers cannot mutate stored state.
"""

import itertools
from datetime import datetime, timezone

from app.core.domain_types import parse_entity_id
from app.schemas.message import InsertMessage, Message
from app.schemas.project import InsertProject, Project
from app.schemas.skill import InsertSkill, Skill


class InMemoryStorage:
    """PortfolioStorage without persistence."""

    def __init__(self):
        self._projects: dict[int, Project] = {}
        self._skills: dict[int, Skill] = {}
        self._messages: dict[int, Message] = {}
        self._project_ids = itertools.count(1)
        self._skill_ids = itertools.count(1)
        self._message_ids = itertools.count(1)

    async def list_projects(self) -> list[Project]:
        return [
            p.model_copy(deep=True)
            for _, p in sorted(self._projects.items(), reverse=True)
        ]

    async def get_project(self, project_id: int | str) -> Project | None:
        pid = parse_entity_id(project_id)
        project = self._projects.get(pid) if pid is not None else None
        return project.model_copy(deep=True) if project else None

    async def create_project(self, data: InsertProject) -> Project:
        project = Project(
            id=next(self._project_ids),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._projects[project.id] = project
        return project.model_copy(deep=True)

    async def list_skills(self) -> list[Skill]:
        ordered = sorted(self._skills.values(), key=lambda s: (s.category, s.name))
        return [s.model_copy() for s in ordered]

    async def create_skill(self, data: InsertSkill) -> Skill:
        skill = Skill(id=next(self._skill_ids), **data.model_dump())
        self._skills[skill.id] = skill
        return skill.model_copy()

    async def create_message(self, data: InsertMessage) -> Message:
        message = Message(
            id=next(self._message_ids),
            created_at=datetime.now(timezone.utc),
            **data.model_dump(),
        )
        self._messages[message.id] = message
        return message.model_copy()

    async def list_messages(self) -> list[Message]:
        return [
            m.model_copy()
            for _, m in sorted(self._messages.items(), reverse=True)
        ]

    async def health_check(self) -> bool:
        return True
