"""
Uniqueness validation and declaration helpers.

Every way of producing an API definition (direct declaration, the
incremental builder, the CRUD generator) ends in ``check_api``.
"""

import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, Union

from api_contract_builder.errors import DuplicateEndpointError
from api_contract_builder.models.endpoint import (
    ApiDefinition,
    Endpoint,
    ErrorDescription,
    Parameter,
)

logger = logging.getLogger(__name__)

EndpointLike = Union[Endpoint, Mapping[str, Any]]


def endpoint_key(endpoint: EndpointLike) -> str:
    """
    Build the canonical '<method> <path>' key of an endpoint.

    Args:
        endpoint: An Endpoint, or a mapping with 'method' and 'path' entries.

    Returns:
        The key used for uniqueness checks.
    """
    if isinstance(endpoint, Mapping):
        method, path = endpoint["method"], endpoint["path"]
    else:
        method, path = endpoint.method, endpoint.path
    if isinstance(method, Enum):
        method = method.value
    if isinstance(method, str):
        method = method.lower()
    return f"{method} {path}"


def check_api(api: Iterable[EndpointLike]) -> None:
    """
    Check an API definition for endpoints sharing both method and path.

    Endpoints are scanned in order; the second occurrence of a key is the
    one reported.

    Args:
        api: The endpoints to check.

    Raises:
        DuplicateEndpointError: On the first repeated (method, path) pair.
    """
    seen: set[str] = set()
    for endpoint in api:
        key = endpoint_key(endpoint)
        if key in seen:
            raise DuplicateEndpointError(key)
        seen.add(key)
    logger.debug("Checked %d endpoints, no duplicates", len(seen))


def as_endpoint(value: EndpointLike) -> Endpoint:
    """Return ``value`` as an Endpoint, validating mappings into the model."""
    if isinstance(value, Endpoint):
        return value
    return Endpoint.model_validate(value)


def as_api(api: Iterable[EndpointLike]) -> ApiDefinition:
    """
    Declare an API definition.

    Uniqueness is checked before mappings are validated, so a duplicate
    is reported even when the declarations are otherwise incomplete.

    Args:
        api: Endpoints, or mappings describing endpoints, in order.

    Returns:
        The same endpoints as an immutable tuple.

    Raises:
        DuplicateEndpointError: If two endpoints share method and path.
        pydantic.ValidationError: If a mapping is not a valid endpoint.
    """
    api = list(api)
    check_api(api)
    return tuple(as_endpoint(endpoint) for endpoint in api)


def as_parameters(
    params: Iterable[Union[Parameter, Mapping[str, Any]]],
) -> tuple[Parameter, ...]:
    """Declare a list of parameters, for reuse across endpoints."""
    return tuple(
        p if isinstance(p, Parameter) else Parameter.model_validate(p)
        for p in params
    )


def as_errors(
    errors: Iterable[Union[ErrorDescription, Mapping[str, Any]]],
) -> tuple[ErrorDescription, ...]:
    """Declare a list of error descriptions, for reuse across endpoints."""
    return tuple(
        e if isinstance(e, ErrorDescription) else ErrorDescription.model_validate(e)
        for e in errors
    )


def find_duplicate_aliases(api: Iterable[Endpoint]) -> list[str]:
    """
    Find aliases carried by more than one endpoint.

    Alias uniqueness is not part of ``check_api``; this is a lint for
    tooling that turns aliases into method names.

    Args:
        api: The endpoints to inspect.

    Returns:
        Repeated aliases in the order they were first seen.
    """
    counts: dict[str, int] = {}
    for endpoint in api:
        if endpoint.alias is not None:
            counts[endpoint.alias] = counts.get(endpoint.alias, 0) + 1
    return [alias for alias, count in counts.items() if count > 1]
