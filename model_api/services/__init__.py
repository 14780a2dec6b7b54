"""Services Layer — endpoint dispatch and the default business implementation.

Invariants:
    - Endpoints are assembled explicitly, one pipeline per operation
    - Business implementations satisfy core.operation_protocols.ModelOperations
"""
