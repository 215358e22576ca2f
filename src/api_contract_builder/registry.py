"""
Endpoint registry for querying a finalized API definition.
"""

from collections.abc import Iterable
from typing import Iterator, Optional, Union

from api_contract_builder.models.endpoint import ApiDefinition, Endpoint, EndpointMethod
from api_contract_builder.validation import check_api


class EndpointRegistry:
    """
    Read-only index over a validated API definition.

    Provides lookups by path, method and alias for tooling that consumes
    the definition (client or route generators).
    """

    def __init__(self, api: Iterable[Endpoint]) -> None:
        """
        Index an API definition.

        Args:
            api: The endpoints to index.

        Raises:
            DuplicateEndpointError: If two endpoints share method and path.
        """
        self._endpoints: ApiDefinition = tuple(api)
        check_api(self._endpoints)

        self._by_key: dict[str, Endpoint] = {}
        self._by_path: dict[str, list[Endpoint]] = {}
        self._by_alias: dict[str, Endpoint] = {}

        for endpoint in self._endpoints:
            self._by_key[endpoint.key] = endpoint

            # Index by path
            self._by_path.setdefault(endpoint.path, []).append(endpoint)

            # First endpoint wins for a repeated alias
            if endpoint.alias is not None and endpoint.alias not in self._by_alias:
                self._by_alias[endpoint.alias] = endpoint

    def get_all(self) -> list[Endpoint]:
        """Get all endpoints, in declaration order."""
        return list(self._endpoints)

    def get_by_path(self, path: str) -> list[Endpoint]:
        """
        Get endpoints by URL path.

        Args:
            path: The URL path to search for.

        Returns:
            List of endpoints declared on that path.
        """
        return list(self._by_path.get(path, []))

    def get_by_method(self, method: Union[EndpointMethod, str]) -> list[Endpoint]:
        """
        Get endpoints by HTTP method.

        Args:
            method: The HTTP method, as enum or case-insensitive string.

        Returns:
            List of endpoints using that method.
        """
        method = EndpointMethod(method.lower()) if isinstance(method, str) else method
        return [e for e in self._endpoints if e.method == method]

    def get_by_alias(self, alias: str) -> Optional[Endpoint]:
        """Get the endpoint declared with the given alias."""
        return self._by_alias.get(alias)

    def find(self, method: Union[EndpointMethod, str], path: str) -> Optional[Endpoint]:
        """
        Find the endpoint for a (method, path) pair.

        Args:
            method: The HTTP method.
            path: The URL path.

        Returns:
            The matching endpoint, or None.
        """
        method = EndpointMethod(method.lower()) if isinstance(method, str) else method
        return self._by_key.get(f"{method.value} {path}")

    def __len__(self) -> int:
        """Return the number of endpoints."""
        return len(self._endpoints)

    def __iter__(self) -> Iterator[Endpoint]:
        """Iterate over all endpoints."""
        return iter(self._endpoints)

    def __contains__(self, endpoint: Endpoint) -> bool:
        """Check if an endpoint is part of the definition."""
        return endpoint in self._endpoints

    @property
    def aliases(self) -> set[str]:
        """Get all aliases in use."""
        return set(self._by_alias.keys())

    @property
    def paths(self) -> set[str]:
        """Get all unique endpoint paths."""
        return set(self._by_path.keys())
