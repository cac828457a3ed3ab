"""Services Layer — store operations behind the HTTP routes.

Invariants:
    - One service class per resource, constructed with the request's AsyncSession
    - Services raise core/errors.py types; routes never build error responses
"""
