"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner; every Post is scoped by user_id

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from bloglist.models.user import User  # noqa: F401
from bloglist.models.post import Post  # noqa: F401
