"""Core Layer — pure request handling logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validation and conformance functions are pure and deterministic

Design Decisions:
    - Functional core separated from the HTTP/DB shell so every stage can be
      unit-tested without a transport
"""
