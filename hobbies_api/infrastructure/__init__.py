"""Infrastructure Layer — database session manager, repository, logging.

Invariants:
    - Only this layer imports SQLAlchemy engine/session machinery
    - Storage error shapes are interpreted in storage_errors.py and nowhere else
"""
