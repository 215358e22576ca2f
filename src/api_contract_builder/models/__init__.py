"""
Data models for API Contract Builder.

This package contains the Pydantic models describing endpoints, their
parameters and errors, and the schema capability used for payload shapes.
"""

from api_contract_builder.models.endpoint import (
    ApiDefinition,
    Endpoint,
    EndpointMethod,
    ErrorDescription,
    Parameter,
    ParameterType,
)
from api_contract_builder.models.schema import Schema

__all__ = [
    # Endpoint models
    "ApiDefinition",
    "Endpoint",
    "EndpointMethod",
    "ErrorDescription",
    "Parameter",
    "ParameterType",
    # Schema capability
    "Schema",
]
