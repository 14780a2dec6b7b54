"""Pipeline Result — explicit success/failure outcome of one request.

Invariants:
    - Exactly one of Success / Failure per request
    - Failure records the Stage where the request stopped
    - Failure.error is never None; it may be any Exception, but only
      ClassifiedError gets a specific status code

Design Decisions:
    - Sum type over a "failed()" probe on arbitrary responses: the encoder
      branches on result.failed without inspecting payload types
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class Stage(str, Enum):
    """Pipeline stages in wire order."""
    DECODE = "decode"
    VALIDATE = "validate"
    CONFORM = "conform"
    DISPATCH = "dispatch"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def failed(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    error: Exception
    stage: Stage

    @property
    def failed(self) -> bool:
        return True


Result = Union[Success[T], Failure]
