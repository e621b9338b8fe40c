"""Services Layer — request handlers that orchestrate validation and the repository.

Invariants:
    - Handlers depend on the HobbyRepository protocol, not on SQLAlchemy
"""
