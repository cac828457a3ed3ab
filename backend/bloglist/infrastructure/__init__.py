"""Infrastructure Layer — database sessions, credentials, and logging setup.

Invariants:
    - Infrastructure may raise core errors but never calls services/ or api/
    - All third-party failures mapped to core/errors.py types
"""
