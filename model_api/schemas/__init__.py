"""Pydantic Schemas — wire shapes for request bodies and success payloads.

Invariants:
    - Schemas check JSON shape and field types only; emptiness and identifier
      format are the validation stage's job
    - Separate from core/request_types: schemas are the HTTP contract
"""
