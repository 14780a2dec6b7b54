"""Error Model — classified exceptions carried from the point of failure to the transport.

Invariants:
    - Every ClassifiedError has a key (ErrorKey) and a human-readable message
    - key and message are read-only once constructed
    - str(error) is the message, nothing else
    - No HTTP status codes here: the transport owns key -> status mapping

Design Decisions:
    - Single hierarchy with ClassifiedError base: transport and global handlers
      catch one type (ADR: uniform error shape)
    - Subclasses only fix the key and a default message; they add no behavior
"""

from enum import Enum


class ErrorKey(str, Enum):
    """Error classification used by the transport to pick a status code."""
    INVALID_REQUEST_BODY = "InvalidRequestBody"
    INVALID_ID = "InvalidID"
    UNAUTHORIZED = "Unauthorized"
    NOT_FOUND = "NotFound"
    INTERNAL = "Internal"


class ClassifiedError(Exception):
    """Base exception for every failure that reaches the wire."""

    def __init__(self, key: ErrorKey, message: str):
        super().__init__(message)
        self._key = key
        self._message = message

    @property
    def key(self) -> ErrorKey:
        return self._key

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, message={self._message!r})"

    def to_response(self) -> dict:
        """Convert to the wire error envelope."""
        return {"error": self._message}


# ─── Request Errors (decode / validation) ────────────────────────

class InvalidRequestBodyError(ClassifiedError):
    """Body missing, malformed, or missing required fields."""
    def __init__(self, message: str = "invalid request body"):
        super().__init__(ErrorKey.INVALID_REQUEST_BODY, message)


class InvalidIDError(ClassifiedError):
    """Identifier missing or not in canonical form."""
    def __init__(self, message: str = "invalid id"):
        super().__init__(ErrorKey.INVALID_ID, message)


# ─── Business Errors ─────────────────────────────────────────────

class UnauthorizedError(ClassifiedError):
    """Caller lacks rights for the operation."""
    def __init__(self, message: str = "unauthorized"):
        super().__init__(ErrorKey.UNAUTHORIZED, message)


class NotFoundError(ClassifiedError):
    """Identifier does not resolve to a stored model."""
    def __init__(self, message: str = "model not found"):
        super().__init__(ErrorKey.NOT_FOUND, message)


class InternalError(ClassifiedError):
    """Business or infrastructure fault."""
    def __init__(self, message: str = "internal error"):
        super().__init__(ErrorKey.INTERNAL, message)
