"""Bloglist Application Package — shared blog-post list with users and stats.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
