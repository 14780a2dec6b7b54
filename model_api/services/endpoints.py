"""Endpoint Dispatch — validate -> conform -> business call, one pipeline per operation.

Invariants:
    - Stages run in fixed order: Validation, Conformance, then the business call
    - A ClassifiedError from any stage ends the request as Failure(error, stage);
      later stages never run
    - The business outcome is passed through unchanged (Success or Failure)
    - Unclassified exceptions from the business call become Failure at DISPATCH
      and are logged with traceback; the transport maps them to 500
    - No retries, no shared mutable state: safe for concurrent requests

Design Decisions:
    - Concrete ordered tuple of (Stage, transform) per endpoint instead of a
      generic middleware chain: the order is visible where it is built
    - Exceptions from validate/conform other than ClassifiedError propagate:
      they are bugs, not request failures, and reach the catch-all handler
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from model_api.core.conform_requests import (
    conform_create, conform_delete, conform_get, conform_list, conform_update,
)
from model_api.core.errors import ClassifiedError
from model_api.core.operation_protocols import ModelOperations
from model_api.core.result import Failure, Result, Stage, Success
from model_api.core.validate_requests import (
    validate_create, validate_delete, validate_get, validate_list, validate_update,
)

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]
Operation = Callable[[Any], Awaitable[Any]]
Endpoint = Callable[[Any], Awaitable[Result]]


def make_endpoint(
    validate: Transform,
    conform: Transform,
    operation: Operation,
    name: str = "",
) -> Endpoint:
    """Wrap a business operation behind validation and conformance."""
    steps: tuple[tuple[Stage, Transform], ...] = (
        (Stage.VALIDATE, validate),
        (Stage.CONFORM, conform),
    )

    async def endpoint(request: Any) -> Result:
        for stage, transform in steps:
            try:
                request = transform(request)
            except ClassifiedError as exc:
                return Failure(exc, stage)
        try:
            value = await operation(request)
        except ClassifiedError as exc:
            return Failure(exc, Stage.DISPATCH)
        except Exception as exc:
            logger.error(
                f"Unclassified error in {name or 'operation'}: {exc}",
                exc_info=True,
                extra={"operation": name, "stage": Stage.DISPATCH.value},
            )
            return Failure(exc, Stage.DISPATCH)
        return Success(value)

    return endpoint


@dataclass(frozen=True)
class Endpoints:
    """The five CRUD pipelines, ready to be bound to routes."""
    create: Endpoint
    get: Endpoint
    list: Endpoint
    update: Endpoint
    delete: Endpoint


def make_endpoints(ops: ModelOperations) -> Endpoints:
    return Endpoints(
        create=make_endpoint(
            validate_create, conform_create, ops.create_model, "create",
        ),
        get=make_endpoint(
            validate_get, conform_get, ops.get_model, "get",
        ),
        list=make_endpoint(
            validate_list, conform_list, ops.list_models, "list",
        ),
        update=make_endpoint(
            validate_update, conform_update, ops.update_model, "update",
        ),
        delete=make_endpoint(
            validate_delete, conform_delete, ops.delete_model, "delete",
        ),
    )
