"""
Incremental API builder.
"""

from collections.abc import Iterable
from typing import Iterator

from api_contract_builder.models.endpoint import ApiDefinition, Endpoint
from api_contract_builder.validation import EndpointLike, as_endpoint, check_api


class Builder:
    """
    Immutable accumulator of endpoint descriptions.

    ``add_endpoint`` never changes the receiver: it returns a new builder,
    so an intermediate builder can be reused to branch into several API
    definitions. Uniqueness is only checked by ``build``.
    """

    def __init__(self, endpoints: Iterable[EndpointLike] = ()) -> None:
        """
        Initialize the builder.

        Args:
            endpoints: Endpoints accumulated so far.
        """
        self._endpoints: tuple[Endpoint, ...] = tuple(as_endpoint(e) for e in endpoints)

    def add_endpoint(self, endpoint: EndpointLike) -> "Builder":
        """
        Append an endpoint.

        Args:
            endpoint: The endpoint, or a mapping describing it.

        Returns:
            A new builder holding the previous endpoints plus this one.
        """
        builder = Builder()
        builder._endpoints = self._endpoints + (as_endpoint(endpoint),)
        return builder

    def build(self) -> ApiDefinition:
        """
        Finalize the API definition.

        Returns:
            The accumulated endpoints, in insertion order.

        Raises:
            DuplicateEndpointError: If two endpoints share method and path.
        """
        check_api(self._endpoints)
        return self._endpoints

    @property
    def endpoints(self) -> tuple[Endpoint, ...]:
        """Endpoints accumulated so far, unvalidated."""
        return self._endpoints

    def __len__(self) -> int:
        return len(self._endpoints)

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._endpoints)

    def __repr__(self) -> str:
        keys = ", ".join(e.key for e in self._endpoints)
        return f"Builder([{keys}])"


def api_builder(endpoint: EndpointLike) -> Builder:
    """
    Start building an API definition.

    Compared to ``as_api`` this lets endpoints be declared one at a time,
    and intermediate states be shared between several definitions.

    Args:
        endpoint: The first endpoint.

    Returns:
        A builder holding that single endpoint.
    """
    return Builder([endpoint])
