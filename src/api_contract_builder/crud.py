"""
CRUD API generation.

Expands a resource name and its schema into the six standard endpoints:
list, get one, create, update, patch and delete.
"""

import logging
from typing import Any

from api_contract_builder.models.endpoint import (
    ApiDefinition,
    Endpoint,
    EndpointMethod,
    Parameter,
    ParameterType,
)
from api_contract_builder.models.schema import Schema
from api_contract_builder.utils import capitalize
from api_contract_builder.validation import as_api

logger = logging.getLogger(__name__)


def _body(description: str, schema: Schema) -> tuple[Parameter, ...]:
    return (
        Parameter(
            name="body",
            type=ParameterType.BODY,
            description=description,
            schema=schema,
        ),
    )


def generate_crud(resource: str, schema: Any) -> ApiDefinition:
    """
    Generate a basic CRUD API for a resource.

    The collection path is the resource name with a literal "s" appended;
    no other pluralization is attempted.

    Args:
        resource: Singular resource name, e.g. "user".
        schema: The resource schema: a pydantic model or a Schema over one.

    Returns:
        Six validated endpoints, in list/get/create/update/patch/delete order.

    Raises:
        TypeError: If the schema does not describe a pydantic model.
    """
    schema = Schema.of(schema)
    partial = schema.partial()
    name = capitalize(resource)
    collection = f"/{resource}s"
    item = f"/{resource}s/:id"

    logger.debug("Generating CRUD endpoints for %r (%s)", resource, schema.name)

    return as_api([
        Endpoint(
            method=EndpointMethod.GET,
            path=collection,
            alias=f"get{name}s",
            description=f"Get all {resource}s",
            response=schema.array(),
        ),
        Endpoint(
            method=EndpointMethod.GET,
            path=item,
            alias=f"get{name}",
            description=f"Get a {resource}",
            response=schema,
        ),
        Endpoint(
            method=EndpointMethod.POST,
            path=collection,
            alias=f"create{name}",
            description=f"Create a {resource}",
            parameters=_body("The object to create", partial),
            response=schema,
        ),
        Endpoint(
            method=EndpointMethod.PUT,
            path=item,
            alias=f"update{name}",
            description=f"Update a {resource}",
            parameters=_body("The object to update", schema),
            response=schema,
        ),
        Endpoint(
            method=EndpointMethod.PATCH,
            path=item,
            alias=f"patch{name}",
            description=f"Patch a {resource}",
            parameters=_body("The object to patch", partial),
            response=schema,
        ),
        Endpoint(
            method=EndpointMethod.DELETE,
            path=item,
            alias=f"delete{name}",
            description=f"Delete a {resource}",
            response=schema,
        ),
    ])
