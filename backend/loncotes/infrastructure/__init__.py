"""Infrastructure Layer — database engine and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy failures leave this layer as DatabaseError (core/errors.py)
"""
