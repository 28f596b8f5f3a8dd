"""Domain Types — entity kinds and value constants shared across the portfolio.

Invariants:
    - Entity ids are positive integers assigned by storage
    - parse_entity_id() never raises — anything that is not a positive integer
      in serial-column range -> None
    - DEFAULT_PROFICIENCY is applied when a skill arrives without one
"""

from enum import Enum


# ─── Value Constants ─────────────────────────────────────────────
DEFAULT_PROFICIENCY = 50
MIN_PROFICIENCY = 0
MAX_PROFICIENCY = 100

# Largest id a 32-bit serial column can hold
MAX_ENTITY_ID = 2_147_483_647


class EntityKind(str, Enum):
    """The three persisted record types."""
    PROJECT = "Project"
    SKILL = "Skill"
    MESSAGE = "Message"


def parse_entity_id(value: object) -> int | None:
    """Coerce a path/lookup value to a positive int id, or None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 < value <= MAX_ENTITY_ID else None
    if isinstance(value, str):
        text = value.strip()
        if not text.isascii() or not text.isdigit():
            return None
        parsed = int(text)
        return parsed if 0 < parsed <= MAX_ENTITY_ID else None
    return None
