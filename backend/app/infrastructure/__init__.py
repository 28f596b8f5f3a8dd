"""Infrastructure Layer — database, storage backends, SMTP and logging.

Invariants:
    - Infrastructure depends on core/ types and errors, never on api/
    - External failures mapped to core error types (StorageUnavailableError) or,
      for best-effort notifications, logged and reported as False
"""
