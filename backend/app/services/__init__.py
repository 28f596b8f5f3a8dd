"""Services Layer — startup routines that orchestrate storage calls.

Invariants:
    - Services depend on PortfolioStorage, never on a concrete backend
"""
