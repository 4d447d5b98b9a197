"""Pydantic Schemas — validation for records crossing the system boundary.

Invariants:
    - Schemas validate at system boundary (identity provider records, catalog
      records, cart-service payloads)
    - Domain types from core/ used for enum fields
    - Every schema converts to a frozen core type; core never sees pydantic

Design Decisions:
    - Separate from core types: schemas are boundary contracts, core types are domain (ADR: DDD boundary)
"""
