"""Pydantic Schemas — entity read/insert shapes and error bodies for the API boundary.

Invariants:
    - Each entity has a read schema and an insert schema (read minus id/created_at)
    - Wire names are camelCase; Python attributes are snake_case
    - Insert schemas drop unknown fields; read schemas are built from ORM rows or JSON

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
