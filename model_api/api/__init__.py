"""API Layer — HTTP transport, routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON; every error body is {"error": "<message>"}

Design Decisions:
    - Thin routes: decode, run the endpoint, encode (api/transport.py)
"""
