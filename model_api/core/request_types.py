"""Request Types — per-operation input carriers and business outputs.

Invariants:
    - All types are frozen dataclasses: equality and repr only, no behavior
    - Raw requests may hold None / malformed values; after validation every
      required field is present and well-typed
    - Identifiers travel as canonical text; storage converts to UUID

Design Decisions:
    - One dataclass per operation over a shared dict: each stage signature
      names exactly what it accepts
    - ListRequest has no fields yet; filters would be added here
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


# ─── Requests ────────────────────────────────────────────────────

@dataclass(frozen=True)
class CreateRequest:
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class GetRequest:
    id: str | None = None


@dataclass(frozen=True)
class ListRequest:
    pass


@dataclass(frozen=True)
class UpdateRequest:
    id: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class DeleteRequest:
    id: str | None = None


Request = CreateRequest | GetRequest | ListRequest | UpdateRequest | DeleteRequest


# ─── Outputs ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Model:
    """A stored model as returned by the business layer."""
    id: UUID
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class DeleteAck:
    """Acknowledgment for a completed delete."""
    id: UUID
    deleted: bool = True
