"""
API Contract Builder

A library for declaring REST-style API contracts as ordered lists of
endpoint descriptions. It validates that every (method, path) pair is
unique, offers an immutable incremental builder, and can generate the
standard CRUD endpoints for a resource from a pydantic model.
"""

from importlib.metadata import version, PackageNotFoundError

from api_contract_builder.builder import Builder, api_builder
from api_contract_builder.crud import generate_crud
from api_contract_builder.errors import ApiContractError, DuplicateEndpointError
from api_contract_builder.models import (
    ApiDefinition,
    Endpoint,
    EndpointMethod,
    ErrorDescription,
    Parameter,
    ParameterType,
    Schema,
)
from api_contract_builder.registry import EndpointRegistry
from api_contract_builder.validation import (
    as_api,
    as_errors,
    as_parameters,
    check_api,
    find_duplicate_aliases,
)

try:
    __version__ = version("api-contract-builder")
except PackageNotFoundError:
    __version__ = "0.1.0"

# Public API exports
__all__ = [
    "__version__",
    # Models
    "ApiDefinition",
    "Endpoint",
    "EndpointMethod",
    "ErrorDescription",
    "Parameter",
    "ParameterType",
    "Schema",
    # Errors
    "ApiContractError",
    "DuplicateEndpointError",
    # Declaration helpers
    "as_api",
    "as_errors",
    "as_parameters",
    "check_api",
    "find_duplicate_aliases",
    # Builders and generators
    "Builder",
    "api_builder",
    "generate_crud",
    "EndpointRegistry",
]
