"""Services Layer — query and mutation functions over an AsyncSession.

Invariants:
    - Every read declares its eager loads explicitly (no lazy loads afterwards)
    - Mutations commit their own unit of work
"""
