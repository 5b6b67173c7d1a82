"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Every request DTO inherits RequestBody (schemas/base.py)
    - Schemas are API contracts; models are persistence
"""
