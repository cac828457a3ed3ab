"""Boundary Protocols — structural contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Core functions read records through these Protocols, never ORM classes

Design Decisions:
    - Protocol over ABC: ORM rows, Pydantic schemas and test doubles all
      satisfy it without inheritance
"""

from typing import Protocol


class PostLike(Protocol):
    """Anything the aggregator can read: an author and a like count.

    Read-only properties so frozen dataclasses and Pydantic models satisfy it
    as well as mutable ORM rows.
    """

    @property
    def author(self) -> str: ...

    @property
    def likes(self) -> int: ...
