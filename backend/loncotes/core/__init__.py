"""Core Layer — pure domain logic, no IO, no async, no DB sessions.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Projections read already-loaded ORM attributes only
"""
