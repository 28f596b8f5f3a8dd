"""Core Layer — domain types, errors, codecs and the API contract registry.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async: everything here is pure and deterministic
    - core/ may import schemas/ (the registry is built from them)
"""
