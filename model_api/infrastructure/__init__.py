"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports the request pipeline (core/validate_*, core/conform_*)
    - Storage failures surface as ClassifiedError(Internal)
"""
