"""
Endpoint data models.

Models describing one declared API operation: its method and path, the
parameters it accepts, the payload it returns and the errors it may answer
with.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from api_contract_builder.models.schema import Schema


class EndpointMethod(str, Enum):
    """HTTP methods an endpoint can be declared with."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"


class ParameterType(str, Enum):
    """Where a parameter is carried in the request."""

    PATH = "Path"
    QUERY = "Query"
    HEADER = "Header"
    BODY = "Body"


class Parameter(BaseModel):
    """A single request parameter."""

    name: str = Field(description="Parameter name")
    type: ParameterType = Field(description="Where the parameter is carried")
    description: Optional[str] = Field(default=None, description="Free text description")
    schema_: Schema = Field(alias="schema", description="Shape of the parameter value")

    class Config:
        frozen = True
        populate_by_name = True
        arbitrary_types_allowed = True

    @field_validator("schema_", mode="before")
    @classmethod
    def _wrap_schema(cls, value: Any) -> Schema:
        return Schema.of(value)


class ErrorDescription(BaseModel):
    """An error an endpoint may answer with."""

    status: Union[int, Literal["default"]] = Field(
        description="HTTP status code, or 'default' for any other status",
    )
    description: Optional[str] = Field(default=None, description="Free text description")
    schema_: Schema = Field(alias="schema", description="Shape of the error payload")

    class Config:
        frozen = True
        populate_by_name = True
        arbitrary_types_allowed = True

    @field_validator("status")
    @classmethod
    def _check_status(cls, value: Union[int, str]) -> Union[int, str]:
        if isinstance(value, int) and not 100 <= value <= 599:
            raise ValueError(f"status must be between 100 and 599, got {value}")
        return value

    @field_validator("schema_", mode="before")
    @classmethod
    def _wrap_schema(cls, value: Any) -> Schema:
        return Schema.of(value)


class Endpoint(BaseModel):
    """Represents one declared API endpoint."""

    method: EndpointMethod = Field(description="HTTP method")
    path: str = Field(description="URL path, with ':name' segments for path parameters")
    alias: Optional[str] = Field(default=None, description="Human friendly identifier")
    description: Optional[str] = Field(default=None, description="Free text description")
    parameters: tuple[Parameter, ...] = Field(
        default=(),
        description="Request parameters, in declaration order",
    )
    response: Schema = Field(description="Shape of the success payload")
    errors: tuple[ErrorDescription, ...] = Field(
        default=(),
        description="Possible error answers, in declaration order",
    )

    class Config:
        frozen = True
        arbitrary_types_allowed = True

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value

    @field_validator("response", mode="before")
    @classmethod
    def _wrap_response(cls, value: Any) -> Schema:
        return Schema.of(value)

    @property
    def key(self) -> str:
        """Canonical '<method> <path>' identity of this endpoint."""
        return f"{self.method.value} {self.path}"

    def get_parameter(self, name: str) -> Optional[Parameter]:
        """Return the first parameter with the given name, if any."""
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        return None


# A validated, ordered, immutable collection of endpoints.
ApiDefinition = tuple[Endpoint, ...]
