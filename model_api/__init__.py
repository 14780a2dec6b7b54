"""Model API — HTTP CRUD service for a single model resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
