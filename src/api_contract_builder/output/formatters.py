"""
Base formatter and formatter registry.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Optional

from api_contract_builder.config import OutputConfig

if TYPE_CHECKING:
    from api_contract_builder.models.endpoint import Endpoint
    from api_contract_builder.models.schema import Schema


class BaseFormatter(ABC):
    """
    Abstract base class for output formatters.

    Subclasses must implement format_api().
    """

    def __init__(self, config: Optional[OutputConfig] = None) -> None:
        """
        Initialize the formatter.

        Args:
            config: Output configuration. Defaults are used if None.
        """
        self.config = config or OutputConfig()

    @abstractmethod
    def format_api(self, endpoints: "list[Endpoint]") -> str:
        """
        Format an API definition.

        Args:
            endpoints: The endpoints to format, in declaration order.

        Returns:
            Formatted string representation.
        """
        pass

    def _schema_to_data(self, schema: "Schema") -> Any:
        """Schema name, or name plus JSON schema when schemas are included."""
        if not self.config.include_schemas:
            return schema.name
        return {"name": schema.name, "json_schema": schema.json_schema()}

    def _endpoint_to_dict(self, endpoint: "Endpoint") -> dict[str, Any]:
        """Convert an endpoint to a plain dictionary."""
        return {
            "method": endpoint.method.value,
            "path": endpoint.path,
            "alias": endpoint.alias,
            "description": endpoint.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.value,
                    "description": p.description,
                    "schema": self._schema_to_data(p.schema_),
                }
                for p in endpoint.parameters
            ],
            "response": self._schema_to_data(endpoint.response),
            "errors": [
                {
                    "status": e.status,
                    "description": e.description,
                    "schema": self._schema_to_data(e.schema_),
                }
                for e in endpoint.errors
            ],
        }


# Formatter registry
_FORMATTERS: dict[str, type[BaseFormatter]] = {}


def register_formatter(name: str) -> Callable[[type[BaseFormatter]], type[BaseFormatter]]:
    """
    Decorator to register a formatter.

    Args:
        name: The name to register the formatter under.

    Returns:
        Decorator function.
    """
    def decorator(cls: type[BaseFormatter]) -> type[BaseFormatter]:
        _FORMATTERS[name] = cls
        return cls
    return decorator


def get_formatter(name: str, config: Optional[OutputConfig] = None) -> BaseFormatter:
    """
    Get a formatter instance by name.

    Args:
        name: The formatter name (e.g., "text", "json", "yaml").
        config: Output configuration passed to the formatter.

    Returns:
        An instance of the requested formatter.

    Raises:
        ValueError: If the formatter name is not recognized.
    """
    # Import formatters to ensure they're registered
    from api_contract_builder.output import (  # noqa: F401
        json_output,
        markdown_output,
        text_output,
        yaml_output,
    )

    if name not in _FORMATTERS:
        available = ", ".join(_FORMATTERS.keys())
        raise ValueError(f"Unknown formatter: {name}. Available: {available}")

    return _FORMATTERS[name](config)
