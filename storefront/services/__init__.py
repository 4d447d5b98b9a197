"""Services Layer — controllers that wrap the pure core with side effects.

Invariants:
    - Each controller owns exactly one mutable reference to a frozen core value
    - Notification and logging happen here, never in core/

Design Decisions:
    - One controller per UI concern for locality (ADR: no god objects)
"""
