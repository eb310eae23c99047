"""Infrastructure Layer — storage gateway, password hashing, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions mapped to core errors before leaving this layer

Design Decisions:
    - Thin wrappers over raw clients: one responsibility per module
"""
