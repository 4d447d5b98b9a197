"""Infrastructure Layer — external service adapters and cross-cutting concerns.

Invariants:
    - Infrastructure imports core types and schemas only, never services/
    - Adapters implement the Protocols in core/boundary_protocols.py

Design Decisions:
    - Reference in-memory adapters so the library runs without a backend
"""
