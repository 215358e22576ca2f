"""
Example API definition for a small pet store.
"""

from typing import Optional

from pydantic import BaseModel

from api_contract_builder import api_builder, as_errors, as_parameters, generate_crud


class Pet(BaseModel):
    id: int
    name: str
    tag: Optional[str] = None


class ApiError(BaseModel):
    code: int
    message: str


errors = as_errors([
    {"status": 404, "description": "Pet not found", "schema": ApiError},
    {"status": "default", "description": "Unexpected error", "schema": ApiError},
])

search_parameters = as_parameters([
    {"name": "q", "type": "Query", "description": "Name filter", "schema": str},
    {"name": "limit", "type": "Query", "schema": int},
])

api = (
    api_builder({
        "method": "get",
        "path": "/pets/search",
        "alias": "searchPets",
        "description": "Search pets by name",
        "parameters": search_parameters,
        "response": list[Pet],
    })
    .add_endpoint({
        "method": "get",
        "path": "/pets/:id/owner",
        "alias": "getPetOwner",
        "parameters": [{"name": "id", "type": "Path", "schema": int}],
        "response": str,
        "errors": errors,
    })
)

crud_api = generate_crud("pet", Pet)
