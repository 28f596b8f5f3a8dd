"""Tech Stack Codec — serializes a project's ordered tech list to a text column.

Invariants:
    - encode_tech_stack() always produces a JSON array string
    - decode_tech_stack() never raises: malformed, absent or non-list input -> []
    - Order and duplicates are preserved in both directions
"""

import json
import logging

logger = logging.getLogger(__name__)


def encode_tech_stack(items: list[str] | None) -> str:
    """Serialize an ordered list of strings for storage."""
    return json.dumps(list(items or []), ensure_ascii=False)


def decode_tech_stack(raw: str | list | None) -> list[str]:
    """Deserialize a stored tech stack. Pure, never raises."""
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        value = raw
    else:
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Malformed tech_stack encoding ignored: {raw!r:.80}")
            return []
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]
