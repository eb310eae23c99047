"""Services — imperative shell around the pure registration rules.

Invariants:
    - Services receive their collaborators at construction (no global lookups)
    - Storage failures propagate as StorageError; validation failures are returned

Design Decisions:
    - Repository and service split: SQL stays out of the decision logic
"""
