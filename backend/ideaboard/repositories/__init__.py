"""Repositories: async SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - One repository per aggregate, bound to a single request-scoped AsyncSession
    - Writes commit before returning
"""
