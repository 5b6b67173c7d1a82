"""Ideaboard Application Package: ideas and users CRUD API.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
