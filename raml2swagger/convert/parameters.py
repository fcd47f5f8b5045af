"""Parameter mapping for RAML actions.

This module provides the ParameterMapper class that turns RAML named
parameters (URI, header and query parameters) and request bodies into the
unified Swagger parameter record.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any

from raml2swagger.convert.schemas import SchemaRegistry
from raml2swagger.exceptions import ParameterError
from raml2swagger.raml.model import AbstractParam, MimeType
from raml2swagger.swagger.models import Items, Parameter, ParameterLocation

__all__ = ['BODY_PARAMETER_NAME', 'ParameterMapper']

BODY_PARAMETER_NAME = 'body'

ARRAY_TYPE = 'array'


class ParameterMapper:
    """Builds unified parameter records.

    Scalar parameters keep their RAML constraints; a repeatable parameter
    becomes an array of its scalar type. The request body becomes a single
    required parameter named "body" that carries a schema.

    Example:
        >>> mapper = ParameterMapper(SchemaRegistry())
        >>> mapper.map_parameters(action.query_parameters, ParameterLocation.QUERY)
        >>> mapper.map_body(action.body)
    """

    def __init__(self, schemas: SchemaRegistry):
        """Initialize the parameter mapper.

        Args:
            schemas: Registry used to resolve body schemas.
        """
        self.schemas = schemas

    def map_parameters(
        self,
        declarations: Mapping[str, AbstractParam],
        location: ParameterLocation,
    ) -> list[Parameter]:
        """Map every declaration of one location, in declaration order."""
        return [
            self.map_parameter(name, declaration, location)
            for name, declaration in declarations.items()
        ]

    def map_parameter(
        self, name: str, declaration: AbstractParam, location: ParameterLocation
    ) -> Parameter:
        """Map one named parameter.

        Args:
            name: The parameter name.
            declaration: The RAML parameter declaration.
            location: Where the parameter is sent.

        Returns:
            The unified parameter record.

        Raises:
            ParameterError: If a numeric or length constraint is malformed.
        """
        scalar_type = _scalar_type(declaration.type)

        if declaration.repeat:
            param_type = ARRAY_TYPE
            items = Items(type=scalar_type) if scalar_type else None
        else:
            param_type = scalar_type
            items = None

        return Parameter(
            in_=location,
            name=name,
            description=declaration.description,
            required=True if declaration.required else None,
            type=param_type,
            items=items,
            default=declaration.default,
            enum=list(declaration.enum) if declaration.enum else None,
            minimum=_number(name, 'minimum', declaration.minimum),
            maximum=_number(name, 'maximum', declaration.maximum),
            min_length=_length(name, 'minLength', declaration.min_length),
            max_length=_length(name, 'maxLength', declaration.max_length),
            pattern=_pattern(name, declaration.pattern),
            example=declaration.example,
        )

    def map_body(self, bodies: Mapping[str, MimeType]) -> Parameter | None:
        """Map the request bodies of an action to one body parameter.

        The schema comes from the first media type declaring one. Returns
        None when the action declares no body at all.

        Raises:
            MalformedSchemaError: If a declared schema is not valid JSON.
        """
        if not bodies:
            return None

        schema = None
        for body in bodies.values():
            if body.schema_:
                schema = self.schemas.resolve(body.schema_)
                break

        return Parameter(
            in_=ParameterLocation.BODY,
            name=BODY_PARAMETER_NAME,
            required=True,
            schema_=schema,
        )


def _scalar_type(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, 'value', value)).lower()


def _number(name: str, field: str, value: Any) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParameterError(name, field, value)
    return value


def _length(name: str, field: str, value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ParameterError(name, field, value)
    return value


def _pattern(name: str, value: Any) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ParameterError(name, 'pattern', value)
    return value
