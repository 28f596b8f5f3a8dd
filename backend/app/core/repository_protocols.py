"""Boundary Protocols — the storage contract between routes/services and persistence.

Invariants:
    - Routes and services only talk to persistence through PortfolioStorage
    - Reads that find nothing return None or [] — never raise
    - Infrastructure failures surface as StorageUnavailableError (core/errors.py)
    - id and created_at are assigned by the implementation, never by callers

Design Decisions:
    - Protocol over ABC: DatabaseStorage and InMemoryStorage share no base class
    - Async methods: implementations do IO; the in-memory one is async for parity
"""

from typing import Protocol

from app.schemas.message import InsertMessage, Message
from app.schemas.project import InsertProject, Project
from app.schemas.skill import InsertSkill, Skill


class PortfolioStorage(Protocol):
    """Create/read capability set for projects, skills and messages."""

    async def list_projects(self) -> list[Project]: ...
    async def get_project(self, project_id: int | str) -> Project | None: ...
    async def create_project(self, data: InsertProject) -> Project: ...

    async def list_skills(self) -> list[Skill]: ...
    async def create_skill(self, data: InsertSkill) -> Skill: ...

    async def create_message(self, data: InsertMessage) -> Message: ...
    async def list_messages(self) -> list[Message]: ...

    async def health_check(self) -> bool: ...
