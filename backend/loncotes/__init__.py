"""Loncotes Library Catalog API — materials, genres, patrons and checkouts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
