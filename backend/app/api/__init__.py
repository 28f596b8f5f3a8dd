"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Paths, methods and schemas come from the contract registry (core/contract.py)
    - All endpoints return JSON bodies declared in the registry
"""
