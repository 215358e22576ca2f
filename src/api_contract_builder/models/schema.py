"""
Schema capability.

A thin adapter that gives every payload description the same small surface
(describe, validate, derive a partial variant) regardless of whether it was
declared as a pydantic model, a builtin type or a generic alias.
"""

from typing import Any, Optional, get_args, get_origin
from weakref import WeakKeyDictionary

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, create_model


# Partial models live as long as the model they were derived from.
_PARTIAL_MODELS: "WeakKeyDictionary[type[BaseModel], type[BaseModel]]" = WeakKeyDictionary()


def _partial_model(model: type[BaseModel]) -> type[BaseModel]:
    """Build (once per model) a copy of ``model`` whose fields are all optional."""
    cached = _PARTIAL_MODELS.get(model)
    if cached is not None:
        return cached

    fields: dict[str, Any] = {}
    for name, info in model.model_fields.items():
        fields[name] = (
            Optional[info.annotation],
            Field(default=None, alias=info.alias, description=info.description),
        )
    partial = create_model(f"Partial{model.__name__}", **fields)
    partial.__module__ = model.__module__
    _PARTIAL_MODELS[model] = partial
    return partial


def _type_name(annotation: Any) -> str:
    """Readable name for a type annotation."""
    origin = get_origin(annotation)
    if origin is not None:
        args = ", ".join(_type_name(arg) for arg in get_args(annotation))
        origin_name = getattr(origin, "__name__", str(origin))
        return f"{origin_name}[{args}]"
    if annotation is None or annotation is type(None):
        return "None"
    return getattr(annotation, "__name__", repr(annotation))


class Schema:
    """
    Describes and validates the shape of a payload.

    Wraps any annotation pydantic can build a ``TypeAdapter`` for. Two
    schemas are equal when they wrap the same annotation.
    """

    def __init__(self, annotation: Any) -> None:
        """
        Initialize the schema.

        Args:
            annotation: A pydantic model, builtin type or generic alias.
        """
        self.annotation = annotation
        self._adapter: TypeAdapter[Any] = TypeAdapter(annotation)

    @classmethod
    def of(cls, value: Any) -> "Schema":
        """Return ``value`` if it is already a schema, otherwise wrap it."""
        if isinstance(value, Schema):
            return value
        return cls(value)

    @property
    def name(self) -> str:
        """Display name of the described type."""
        return _type_name(self.annotation)

    @property
    def is_object(self) -> bool:
        """Whether the schema describes a pydantic model."""
        return isinstance(self.annotation, type) and issubclass(self.annotation, BaseModel)

    def validate(self, value: Any) -> Any:
        """
        Validate a value against the schema.

        Args:
            value: The value to validate.

        Returns:
            The validated value as produced by pydantic.

        Raises:
            pydantic.ValidationError: If the value does not match.
        """
        return self._adapter.validate_python(value)

    def is_valid(self, value: Any) -> bool:
        """Check a value against the schema without raising."""
        try:
            self._adapter.validate_python(value)
        except ValidationError:
            return False
        return True

    def partial(self) -> "Schema":
        """
        Derive a schema in which every field is optional.

        Only field types, aliases and descriptions are carried over: field
        constraints (``ge``, ``max_length``, ...) and model validators of the
        original model do not apply to the partial one.

        Returns:
            A schema over a ``Partial<Model>`` model class. Repeated calls
            return equal schemas.

        Raises:
            TypeError: If the schema does not describe a pydantic model.
        """
        if not self.is_object:
            raise TypeError(f"Cannot derive a partial schema from {self.name}")
        return Schema(_partial_model(self.annotation))

    def array(self) -> "Schema":
        """Derive a schema describing a list of this schema's values."""
        return Schema(list[self.annotation])

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema of the described type."""
        return self._adapter.json_schema()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self.annotation == other.annotation

    def __hash__(self) -> int:
        return hash(self.annotation)

    def __repr__(self) -> str:
        return f"Schema({self.name})"
