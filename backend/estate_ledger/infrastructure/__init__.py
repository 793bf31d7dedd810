"""Infrastructure Layer — cross-cutting concerns (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic

Design Decisions:
    - Kept apart from services: handlers log through the stdlib logger only
"""
