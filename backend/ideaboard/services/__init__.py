"""Services: business rules between routes and repositories.

Invariants:
    - Services raise IdeaboardError subclasses, never HTTPException
    - Services receive repositories through their constructor
"""
