"""
Pydantic V2 models for the RAML 0.8 descriptor tree.

The models accept RAML-shaped mappings as produced by a YAML parser, so a
document can be validated straight from its parsed form:

    import yaml
    from raml2swagger.raml import Raml

    data = yaml.safe_load(text)
    raml = Raml.from_raml(data)

    for uri, resource in raml.resources.items():
        for method, action in resource.actions.items():
            print(method.upper(), uri, action.description)

Keys beginning with "/" are collected as child resources, HTTP method keys
as actions, and everything RAML 0.8 declares but the converter does not use
(traits, resource types, securedBy, ...) is ignored.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)

DEFAULT_MEDIA_TYPE = "application/json"

HTTP_METHODS = (
    "get",
    "post",
    "put",
    "delete",
    "head",
    "patch",
    "options",
    "trace",
    "connect",
)


def _mapping(value: Any) -> Any:
    """Treat an empty YAML node as an empty mapping."""
    return {} if value is None else value


def _named_parameters(value: Any) -> Any:
    """Normalize a named-parameter mapping.

    RAML 0.8 allows a parameter to be declared with several alternative
    types as a list; only the first declaration is kept.
    """
    value = _mapping(value)
    if not isinstance(value, dict):
        return value

    result = {}
    for name, declaration in value.items():
        if isinstance(declaration, list):
            declaration = declaration[0] if declaration else None
        result[str(name)] = _mapping(declaration)
    return result


def _bodies(value: Any, info: ValidationInfo) -> Any:
    """Normalize a body mapping to be keyed by media type.

    A body declared without media types is filed under the document's
    default media type, passed in through the validation context.
    """
    value = _mapping(value)
    if not isinstance(value, dict) or not value:
        return value

    if not any("/" in str(key) for key in value):
        media_type = (info.context or {}).get("media_type") or DEFAULT_MEDIA_TYPE
        value = {media_type: value}

    return {str(key): _mapping(body) for key, body in value.items()}


# ============================================================================
# Enums
# ============================================================================


class ParamType(str, Enum):
    """RAML 0.8 named parameter types."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    DATE = "date"
    BOOLEAN = "boolean"
    FILE = "file"


# ============================================================================
# Base Models
# ============================================================================


class RamlModel(BaseModel):
    """Base model for descriptor tree nodes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DocumentationItem(RamlModel):
    """One entry of the top-level documentation list."""

    title: str = ""
    content: str = ""


# ============================================================================
# Parameter Models
# ============================================================================


class AbstractParam(RamlModel):
    """Fields shared by every RAML named parameter."""

    display_name: Optional[str] = Field(None, alias="displayName")
    description: Optional[str] = None
    type: ParamType = ParamType.STRING
    enum: Optional[List[Any]] = None
    pattern: Optional[str] = None
    min_length: Optional[int] = Field(None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(None, alias="maxLength", ge=0)
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    example: Optional[Any] = None
    default: Optional[Any] = None
    repeat: bool = False
    required: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def lower_case_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.lower()
        return value


class UriParameter(AbstractParam):
    """URI or base URI parameter; required unless declared otherwise."""

    required: bool = True


class Header(AbstractParam):
    """Request header declaration."""


class QueryParameter(AbstractParam):
    """Query string parameter declaration."""


# ============================================================================
# Body & Response Models
# ============================================================================


class MimeType(RamlModel):
    """Body declaration for one media type."""

    schema_: Optional[str] = Field(None, alias="schema")
    example: Optional[Any] = None

    @field_validator("schema_", mode="before")
    @classmethod
    def serialize_inline_schema(cls, value: Any) -> Any:
        """Schemas written as YAML mappings are kept as JSON text."""
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return value


class Response(RamlModel):
    """Response declaration for one status code."""

    description: Optional[str] = None
    body: Dict[str, MimeType] = {}

    @field_validator("body", mode="before")
    @classmethod
    def normalize_body(cls, value: Any, info: ValidationInfo) -> Any:
        return _bodies(value, info)


# ============================================================================
# Resource Models
# ============================================================================


class Action(RamlModel):
    """One HTTP method declared on a resource."""

    description: Optional[str] = None
    headers: Dict[str, Header] = {}
    query_parameters: Dict[str, QueryParameter] = Field({}, alias="queryParameters")
    body: Dict[str, MimeType] = {}
    responses: Dict[str, Response] = {}

    @field_validator("headers", "query_parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value: Any) -> Any:
        return _named_parameters(value)

    @field_validator("body", mode="before")
    @classmethod
    def normalize_body(cls, value: Any, info: ValidationInfo) -> Any:
        return _bodies(value, info)

    @field_validator("responses", mode="before")
    @classmethod
    def normalize_responses(cls, value: Any) -> Any:
        """Status codes come out of YAML as integers."""
        value = _mapping(value)
        if not isinstance(value, dict):
            return value
        return {str(code): _mapping(response) for code, response in value.items()}


def _split_resource_keys(data: Any) -> Any:
    """Collect "/..." keys as child resources and method keys as actions."""
    data = _mapping(data)
    if not isinstance(data, dict):
        return data

    result: Dict[str, Any] = {}
    resources = dict(_mapping(data.get("resources")))
    actions = dict(_mapping(data.get("actions")))

    for key, value in data.items():
        if key in ("resources", "actions"):
            continue
        if isinstance(key, str) and key.startswith("/"):
            resources[key] = _mapping(value)
        elif isinstance(key, str) and key.lower() in HTTP_METHODS:
            actions[key.lower()] = _mapping(value)
        else:
            result[key] = value

    result["resources"] = resources
    result["actions"] = actions
    return result


class Resource(RamlModel):
    """
    One URI-addressable node of the resource tree.

    Child resources are keyed by their relative URI; the full URI of a
    resource is the concatenation of the keys on its path from the root.
    """

    display_name: Optional[str] = Field(None, alias="displayName")
    description: Optional[str] = None
    uri_parameters: Dict[str, UriParameter] = Field({}, alias="uriParameters")
    actions: Dict[str, Action] = {}
    resources: Dict[str, "Resource"] = {}

    @model_validator(mode="before")
    @classmethod
    def split_children(cls, data: Any) -> Any:
        return _split_resource_keys(data)

    @field_validator("uri_parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value: Any) -> Any:
        return _named_parameters(value)


# ============================================================================
# Security Models
# ============================================================================


class SecurityScheme(RamlModel):
    """Security scheme declaration."""

    type: Optional[str] = None
    description: Optional[str] = None
    described_by: Optional[Dict[str, Any]] = Field(None, alias="describedBy")
    settings: Dict[str, Any] = {}

    @field_validator("settings", mode="before")
    @classmethod
    def empty_settings(cls, value: Any) -> Any:
        return _mapping(value)


# ============================================================================
# Root Model
# ============================================================================


class Raml(RamlModel):
    """
    Root of a RAML 0.8 descriptor tree.

    Use `Raml.from_raml` to validate a parsed document so that bodies
    declared without media types pick up the document's `mediaType`.
    """

    title: str = ""
    version: Optional[str] = None
    base_uri: Optional[str] = Field(None, alias="baseUri")
    protocols: List[str] = []
    media_type: Optional[str] = Field(None, alias="mediaType")
    base_uri_parameters: Dict[str, UriParameter] = Field({}, alias="baseUriParameters")
    documentation: List[DocumentationItem] = []
    schemas: List[Dict[str, str]] = []
    security_schemes: List[Dict[str, SecurityScheme]] = Field(
        [], alias="securitySchemes"
    )
    resources: Dict[str, Resource] = {}

    @classmethod
    def from_raml(cls, data: Dict[str, Any]) -> "Raml":
        """Validate a parsed RAML mapping."""
        media_type = data.get("mediaType") if isinstance(data, dict) else None
        return cls.model_validate(data, context={"media_type": media_type})

    @model_validator(mode="before")
    @classmethod
    def split_resources(cls, data: Any) -> Any:
        data = _mapping(data)
        if not isinstance(data, dict):
            return data
        data = dict(data)
        resources = dict(_mapping(data.pop("resources", None)))
        for key in [k for k in data if isinstance(k, str) and k.startswith("/")]:
            resources[key] = _mapping(data.pop(key))
        data["resources"] = resources
        return data

    @field_validator("title", mode="before")
    @classmethod
    def empty_title(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("version", mode="before")
    @classmethod
    def version_as_string(cls, value: Any) -> Any:
        """YAML reads `version: 1.0` as a number."""
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("protocols", "documentation", mode="before")
    @classmethod
    def empty_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("base_uri_parameters", mode="before")
    @classmethod
    def normalize_parameters(cls, value: Any) -> Any:
        return _named_parameters(value)

    @field_validator("schemas", mode="before")
    @classmethod
    def normalize_schemas(cls, value: Any) -> Any:
        """Accept a single mapping and keep YAML-written schemas as JSON text."""
        if value is None:
            return []
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, list):
            return value
        return [
            {
                str(name): body if isinstance(body, str) else json.dumps(body)
                for name, body in entry.items()
            }
            if isinstance(entry, dict)
            else entry
            for entry in value
        ]

    @field_validator("security_schemes", mode="before")
    @classmethod
    def normalize_security_schemes(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, dict):
            value = [value]
        if not isinstance(value, list):
            return value
        return [
            {str(name): _mapping(scheme) for name, scheme in entry.items()}
            if isinstance(entry, dict)
            else entry
            for entry in value
        ]


Resource.model_rebuild()
