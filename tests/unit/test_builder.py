"""
Unit tests for the incremental builder.
"""

import pytest
from pydantic import BaseModel

from api_contract_builder.builder import Builder, api_builder
from api_contract_builder.errors import DuplicateEndpointError
from api_contract_builder.models.endpoint import Endpoint
from api_contract_builder.validation import as_api


class Note(BaseModel):
    id: int
    text: str


@pytest.fixture
def endpoints() -> list[Endpoint]:
    """Three endpoints with distinct (method, path) pairs."""
    return [
        Endpoint(method="get", path="/notes", alias="getNotes", response=list[Note]),
        Endpoint(method="post", path="/notes", alias="createNote", response=Note),
        Endpoint(method="get", path="/notes/:id", alias="getNote", response=Note),
    ]


class TestBuilder:
    """Tests for the Builder class."""

    def test_api_builder_holds_one_endpoint(self, endpoints: list[Endpoint]) -> None:
        builder = api_builder(endpoints[0])

        assert len(builder) == 1
        assert builder.endpoints == (endpoints[0],)

    def test_build_preserves_order(self, endpoints: list[Endpoint]) -> None:
        api = (
            api_builder(endpoints[0])
            .add_endpoint(endpoints[1])
            .add_endpoint(endpoints[2])
            .build()
        )

        assert api == tuple(endpoints)

    def test_build_matches_as_api(self, endpoints: list[Endpoint]) -> None:
        """Test that incremental building equals direct declaration."""
        builder = api_builder(endpoints[0])
        for endpoint in endpoints[1:]:
            builder = builder.add_endpoint(endpoint)

        assert builder.build() == as_api(endpoints)

    def test_build_fails_like_as_api(self, endpoints: list[Endpoint]) -> None:
        """Test that both paths report the same duplicate."""
        duplicated = endpoints + [endpoints[1]]
        builder = Builder(duplicated)

        with pytest.raises(DuplicateEndpointError) as from_builder:
            builder.build()
        with pytest.raises(DuplicateEndpointError) as from_as_api:
            as_api(duplicated)

        assert from_builder.value.key == from_as_api.value.key == "post /notes"

    def test_add_endpoint_does_not_mutate(self, endpoints: list[Endpoint]) -> None:
        """Test that add_endpoint returns a new builder."""
        base = api_builder(endpoints[0])
        extended = base.add_endpoint(endpoints[1])

        assert extended is not base
        assert len(base) == 1
        assert base.build() == (endpoints[0],)
        assert extended.build() == (endpoints[0], endpoints[1])

    def test_branching(self, endpoints: list[Endpoint]) -> None:
        """Test that one intermediate builder can branch into two definitions."""
        base = api_builder(endpoints[0])

        left = base.add_endpoint(endpoints[1]).build()
        right = base.add_endpoint(endpoints[2]).build()

        assert left == (endpoints[0], endpoints[1])
        assert right == (endpoints[0], endpoints[2])

    def test_duplicate_is_only_checked_on_build(self, endpoints: list[Endpoint]) -> None:
        builder = api_builder(endpoints[0]).add_endpoint(endpoints[0])

        assert len(builder) == 2
        with pytest.raises(DuplicateEndpointError, match="get /notes"):
            builder.build()

    def test_add_endpoint_accepts_mappings(self) -> None:
        builder = api_builder({"method": "get", "path": "/notes", "response": list[Note]})
        builder = builder.add_endpoint({"method": "delete", "path": "/notes/:id", "response": Note})

        api = builder.build()

        assert [e.key for e in api] == ["get /notes", "delete /notes/:id"]

    def test_empty_builder(self) -> None:
        assert Builder().build() == ()

    def test_iteration(self, endpoints: list[Endpoint]) -> None:
        builder = Builder(endpoints)
        assert list(builder) == endpoints

    def test_repr(self, endpoints: list[Endpoint]) -> None:
        builder = Builder(endpoints[:2])
        assert repr(builder) == "Builder([get /notes, post /notes])"
