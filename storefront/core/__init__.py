"""Core Layer — pure domain logic, no IO, no async, no logging.

Invariants:
    - No module in core/ imports from services/, schemas/, or infrastructure/
    - All functions are pure and deterministic
    - Failures are returned as values, never raised

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
