"""
Unit tests for the CRUD API generator.
"""

import pytest
from pydantic import BaseModel

from api_contract_builder.crud import generate_crud
from api_contract_builder.models.endpoint import EndpointMethod, ParameterType
from api_contract_builder.models.schema import Schema
from api_contract_builder.registry import EndpointRegistry
from api_contract_builder.validation import check_api


class User(BaseModel):
    id: int
    name: str


class Widget(BaseModel):
    id: int
    label: str


class TestGenerateCrud:
    """Tests for generate_crud."""

    def test_six_endpoints_in_order(self) -> None:
        """Test methods, paths and aliases of the generated endpoints."""
        api = generate_crud("widget", Widget)

        assert [(e.method, e.path, e.alias) for e in api] == [
            (EndpointMethod.GET, "/widgets", "getWidgets"),
            (EndpointMethod.GET, "/widgets/:id", "getWidget"),
            (EndpointMethod.POST, "/widgets", "createWidget"),
            (EndpointMethod.PUT, "/widgets/:id", "updateWidget"),
            (EndpointMethod.PATCH, "/widgets/:id", "patchWidget"),
            (EndpointMethod.DELETE, "/widgets/:id", "deleteWidget"),
        ]

    def test_list_endpoint(self) -> None:
        endpoint = generate_crud("user", User)[0]

        assert endpoint.method == EndpointMethod.GET
        assert endpoint.path == "/users"
        assert endpoint.alias == "getUsers"
        assert endpoint.description == "Get all users"
        assert endpoint.parameters == ()
        assert endpoint.response == Schema(list[User])

    def test_create_endpoint(self) -> None:
        """Test that creation takes a partial body and returns the resource."""
        endpoint = generate_crud("user", User)[2]

        assert endpoint.method == EndpointMethod.POST
        assert endpoint.path == "/users"
        assert endpoint.alias == "createUser"
        assert endpoint.response == Schema(User)

        (body,) = endpoint.parameters
        assert body.name == "body"
        assert body.type == ParameterType.BODY
        assert body.description == "The object to create"
        assert body.schema_ == Schema(User).partial()

    def test_update_takes_full_body(self) -> None:
        (body,) = generate_crud("user", User)[3].parameters

        assert body.schema_ == Schema(User)
        assert body.description == "The object to update"

    def test_patch_takes_partial_body(self) -> None:
        (body,) = generate_crud("user", User)[4].parameters

        assert body.schema_ == Schema(User).partial()
        assert body.schema_.validate({"name": "Ada"}).id is None

    def test_get_and_delete_have_no_parameters(self) -> None:
        api = generate_crud("user", User)

        assert api[1].parameters == ()
        assert api[5].parameters == ()
        assert api[1].response == Schema(User)
        assert api[5].response == Schema(User)

    def test_descriptions(self) -> None:
        descriptions = [e.description for e in generate_crud("user", User)]

        assert descriptions == [
            "Get all users",
            "Get a user",
            "Create a user",
            "Update a user",
            "Patch a user",
            "Delete a user",
        ]

    def test_deterministic(self) -> None:
        assert generate_crud("widget", Widget) == generate_crud("widget", Widget)

    @pytest.mark.parametrize("resource", ["user", "x", "", "users", "child", "Order", "line-item"])
    def test_never_duplicates(self, resource: str) -> None:
        """Test that every resource name yields six distinct endpoints."""
        api = generate_crud(resource, Widget)

        check_api(api)
        assert len({e.key for e in api}) == 6

    def test_plural_is_literal(self) -> None:
        """Test that only a literal 's' is appended to the resource."""
        api = generate_crud("child", Widget)

        assert api[0].path == "/childs"
        assert api[0].alias == "getChilds"

    def test_already_capitalized_resource(self) -> None:
        api = generate_crud("Order", Widget)

        assert api[0].path == "/Orders"
        assert api[1].alias == "getOrder"

    def test_accepts_schema(self) -> None:
        assert generate_crud("user", Schema(User)) == generate_crud("user", User)

    def test_requires_object_schema(self) -> None:
        with pytest.raises(TypeError):
            generate_crud("name", str)

    def test_registry_lookup(self) -> None:
        registry = EndpointRegistry(generate_crud("user", User))

        assert registry.get_by_alias("patchUser").method == EndpointMethod.PATCH
        assert len(registry.get_by_path("/users/:id")) == 4
