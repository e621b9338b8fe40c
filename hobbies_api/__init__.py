"""Hobbies API Package — CRUD REST service for hobbies.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
