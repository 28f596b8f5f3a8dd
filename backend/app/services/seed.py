"""Seed Routine — one-time population of example projects and skills.

Invariants:
    - A table with at least one row is skipped entirely (idempotent across restarts)
    - Every row of a table is validated before the first insert, so bad seed data
      leaves the table empty
    - Rows go through insert-schema validation and create_project/create_skill,
      the same path as any API write
    - Seeding errors are logged with traceback and never abort startup
    - Not re-entrant: runs once, sequentially, before requests are served
"""

import logging
from dataclasses import dataclass

from app.core.repository_protocols import PortfolioStorage
from app.core.seed_data import SEED_PROJECTS, SEED_SKILLS
from app.schemas.project import InsertProject
from app.schemas.skill import InsertSkill
from app.schemas.validate import validate_payload

logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    projects_inserted: int = 0
    skills_inserted: int = 0
    failed: bool = False


async def seed_database(
    storage: PortfolioStorage,
    projects: list[dict] | None = None,
    skills: list[dict] | None = None,
) -> SeedReport:
    """Insert example rows into empty tables. Never raises."""
    report = SeedReport()
    project_rows = SEED_PROJECTS if projects is None else projects
    skill_rows = SEED_SKILLS if skills is None else skills

    try:
        report.projects_inserted = await _seed_projects(storage, project_rows)
    except Exception as e:
        report.failed = True
        logger.error(f"Project seeding failed: {e}", exc_info=True)

    try:
        report.skills_inserted = await _seed_skills(storage, skill_rows)
    except Exception as e:
        report.failed = True
        logger.error(f"Skill seeding failed: {e}", exc_info=True)

    logger.info(
        f"Seeding finished: {report.projects_inserted} projects, "
        f"{report.skills_inserted} skills",
        extra={"seeded": report.projects_inserted + report.skills_inserted},
    )
    return report


async def _seed_projects(storage: PortfolioStorage, rows: list[dict]) -> int:
    if await storage.list_projects():
        logger.info("Projects table not empty, skipping seed")
        return 0
    payloads = [validate_payload(InsertProject, row) for row in rows]
    return await _insert_all(payloads, storage.create_project, "projects")


async def _seed_skills(storage: PortfolioStorage, rows: list[dict]) -> int:
    if await storage.list_skills():
        logger.info("Skills table not empty, skipping seed")
        return 0
    payloads = [validate_payload(InsertSkill, row) for row in rows]
    return await _insert_all(payloads, storage.create_skill, "skills")


async def _insert_all(payloads: list, create, table: str) -> int:
    inserted = 0
    try:
        for payload in payloads:
            await create(payload)
            inserted += 1
    except Exception:
        # table is no longer empty, later starts will skip it
        logger.error(
            f"Seeding {table} stopped after {inserted} of {len(payloads)} rows",
            extra={"seeded": inserted},
        )
        raise
    return inserted
