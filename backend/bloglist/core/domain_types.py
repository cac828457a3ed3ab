"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId, UserId wrap UUIDs — never use bare UUID in service signatures
    - Length limits live here so schemas and models agree on them

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

PostId = NewType("PostId", UUID)
UserId = NewType("UserId", UUID)


# ─── Field Limits ────────────────────────────────────────────────

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 64
NAME_MAX_LENGTH = 200
TITLE_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 200
URL_MAX_LENGTH = 2000
LIKES_MAX = 2**31 - 1  # INTEGER column upper bound
