"""ORM Models — SQLAlchemy declarative models for the library catalog.

Invariants:
    - All models inherit from Base (db/base.py)
    - Material is the only entity written through the API

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from loncotes.models.genre import Genre  # noqa: F401
from loncotes.models.material_type import MaterialType  # noqa: F401
from loncotes.models.material import Material  # noqa: F401
from loncotes.models.patron import Patron  # noqa: F401
from loncotes.models.checkout import Checkout  # noqa: F401
