"""Schema registry for the `definitions` section.

This module records the named JSON schemas declared at the top of a RAML
document and decides, for every body or response schema, whether it is a
reference to one of them or an inline schema.
"""

import json
import logging
from typing import Any

from raml2swagger.exceptions import MalformedSchemaError

logger = logging.getLogger(__name__)

__all__ = [
    'REF_PREFIX',
    'SchemaRegistry',
    'legacy_required_properties',
    'strip_legacy_required_markers',
]

REF_PREFIX = '#/definitions/'

# Keys dropped from the top level of a schema before it is embedded
TOP_LEVEL_DROPPED_KEYS = ('$schema', 'required')

# Keys whose value maps arbitrary names (possibly "required") to schemas
NAMED_SCHEMA_KEYS = ('properties', 'patternProperties', 'definitions')


def strip_legacy_required_markers(schema: Any) -> Any:
    """Return a copy of `schema` with every `required` key removed at any depth.

    Both the JSON-schema array form and the legacy `"required": "true"`
    string form are removed; the input is left untouched.
    Names inside `properties` (and similar name-to-schema mappings) are
    never dropped, so a property called `required` survives.
    """
    if isinstance(schema, dict):
        return {
            key: (
                _strip_named_schemas(value)
                if key in NAMED_SCHEMA_KEYS
                else strip_legacy_required_markers(value)
            )
            for key, value in schema.items()
            if key != 'required'
        }
    if isinstance(schema, list):
        return [strip_legacy_required_markers(item) for item in schema]
    return schema


def _strip_named_schemas(value: Any) -> Any:
    """Strip inside each schema of a name-to-schema mapping, keeping every name."""
    if not isinstance(value, dict):
        return strip_legacy_required_markers(value)
    return {name: strip_legacy_required_markers(schema) for name, schema in value.items()}


def _is_flagged_required(value: Any) -> bool:
    return value is True or value == 'true'


def legacy_required_properties(properties: Any) -> list[str]:
    """Names of the properties flagged with their own `required: "true"`."""
    if not isinstance(properties, dict):
        return []
    return [
        name
        for name, prop in properties.items()
        if isinstance(prop, dict) and _is_flagged_required(prop.get('required'))
    ]


def parse_schema(text: str) -> dict[str, Any]:
    """Parse JSON schema text into a mapping.

    Raises:
        MalformedSchemaError: If the text is not a JSON object.
    """
    try:
        schema = json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedSchemaError(str(text), cause=e) from e

    if not isinstance(schema, dict):
        raise MalformedSchemaError(str(text), cause=ValueError('not a JSON object'))
    return schema


class SchemaRegistry:
    """Owns the `definitions` section and the name index used for `$ref`s.

    A registry is created per conversion and filled before the resource
    tree is walked, so any body naming a declared schema resolves to a
    reference instead of an inline copy.

    Example:
        >>> registry = SchemaRegistry()
        >>> registry.register('Widget', '{"type": "object"}')
        >>> registry.resolve('Widget')
        {'$ref': '#/definitions/Widget'}
    """

    def __init__(self):
        self._definitions: dict[str, dict[str, Any]] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    @property
    def definitions(self) -> dict[str, dict[str, Any]]:
        """The registered definitions, keyed by schema name."""
        return dict(self._definitions)

    def register_all(self, schemas: list[dict[str, str]]) -> None:
        """Register every schema of the document's schema list."""
        for entry in schemas:
            for name, text in entry.items():
                self.register(name, text)

    def register(self, name: str, text: str) -> dict[str, Any]:
        """Register one named schema and return its definition.

        Every `required` key below the top level is stripped; properties
        carrying their own `required: "true"` become the top-level
        `required` array.

        Raises:
            MalformedSchemaError: If the schema text is not a JSON object.
        """
        body = parse_schema(text)

        definition = strip_legacy_required_markers(
            {key: value for key, value in body.items() if key not in TOP_LEVEL_DROPPED_KEYS}
        )
        required = legacy_required_properties(body.get('properties'))
        if required:
            definition['required'] = required

        previous = self._definitions.get(name)
        if previous is not None and previous != definition:
            logger.warning(
                f"Schema '{name}' is declared more than once with different "
                f'content, keeping the last declaration'
            )

        self._definitions[name] = definition
        return definition

    def resolve(self, schema: str) -> dict[str, Any]:
        """Resolve a body or response schema.

        Args:
            schema: A declared schema name or inline JSON schema text.

        Returns:
            A `$ref` to the declared schema, or the inline schema without
            its top-level `$schema` and `required` keys.

        Raises:
            MalformedSchemaError: If the text is neither a declared name
                nor a JSON object.
        """
        if schema in self._definitions:
            return {'$ref': f'{REF_PREFIX}{schema}'}

        inline = parse_schema(schema)
        return {
            key: value
            for key, value in inline.items()
            if key not in TOP_LEVEL_DROPPED_KEYS
        }
