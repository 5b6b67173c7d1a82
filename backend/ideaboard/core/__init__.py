"""Core Layer: domain types, errors, credential helpers and repository contracts.

Invariants:
    - Core never imports from api/, services/ or infrastructure/
"""
