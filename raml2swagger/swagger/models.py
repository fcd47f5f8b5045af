"""
Pydantic V2 models for the Swagger 2.0 document produced by the converter.

Only the subset of Swagger 2.0 that a RAML 0.8 document maps onto is
modelled. JSON schemas (definitions, body and response schemas) are kept
as plain mappings because they are copied from the source document.

Usage Example:
-------------

    from raml2swagger.swagger import Info, SwaggerDocument

    document = SwaggerDocument(
        info=Info(title="My API", version="v1"),
        host="api.example.com",
        paths={"/users": {"get": {"responses": {"200": {"description": "OK"}}}}},
    )

    # Export to a JSON-ready dict
    output = document.to_dict()
"""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SWAGGER_VERSION = "2.0"


# ============================================================================
# Enums
# ============================================================================


class ParameterLocation(str, Enum):
    """Parameter location types emitted by the converter."""

    PATH = "path"
    HEADER = "header"
    QUERY = "query"
    BODY = "body"


class SecuritySchemeType(str, Enum):
    """Security definition types."""

    BASIC = "basic"
    OAUTH2 = "oauth2"


class OAuth2Flow(str, Enum):
    """OAuth2 flow types."""

    IMPLICIT = "implicit"
    PASSWORD = "password"
    APPLICATION = "application"
    ACCESS_CODE = "accessCode"


# ============================================================================
# Base Models
# ============================================================================


class SwaggerModel(BaseModel):
    """Base model for output objects; serialized by alias."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready mapping with absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


# ============================================================================
# Info Model
# ============================================================================


class Info(SwaggerModel):
    """General information about the API."""

    title: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None


# ============================================================================
# Parameter Models
# ============================================================================


class Items(SwaggerModel):
    """Items object of an array parameter."""

    type: str


class Parameter(SwaggerModel):
    """
    Unified parameter record.

    One shape for path, header, query and body parameters: scalar
    parameters carry `type` (and `items` when repeated), the body
    parameter carries `schema` instead.
    """

    in_: ParameterLocation = Field(..., alias="in")
    name: str
    description: Optional[str] = None
    required: Optional[Literal[True]] = None
    type: Optional[str] = None
    items: Optional[Items] = None
    default: Optional[Any] = None
    enum: Optional[List[Any]] = None
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    min_length: Optional[int] = Field(None, alias="minLength")
    max_length: Optional[int] = Field(None, alias="maxLength")
    pattern: Optional[str] = None
    example: Optional[Any] = None
    schema_: Optional[Dict[str, Any]] = Field(None, alias="schema")


# ============================================================================
# Response & Operation Models
# ============================================================================


class Response(SwaggerModel):
    """Response object; description is omitted when it cannot be derived."""

    description: Optional[str] = None
    schema_: Optional[Dict[str, Any]] = Field(None, alias="schema")


class Operation(SwaggerModel):
    """Operation (HTTP method) on a path."""

    description: Optional[str] = None
    consumes: Optional[List[str]] = None
    produces: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None
    responses: Dict[str, Response]


PathItem = Dict[str, Operation]


# ============================================================================
# Security Models
# ============================================================================


class BasicSecurityDefinition(SwaggerModel):
    """Basic authentication security definition."""

    type: Literal[SecuritySchemeType.BASIC] = SecuritySchemeType.BASIC
    description: Optional[str] = None


class OAuth2SecurityDefinition(SwaggerModel):
    """OAuth2 security definition for a single flow."""

    type: Literal[SecuritySchemeType.OAUTH2] = SecuritySchemeType.OAUTH2
    description: Optional[str] = None
    flow: OAuth2Flow
    authorization_url: Optional[str] = Field(None, alias="authorizationUrl")
    token_url: Optional[str] = Field(None, alias="tokenUrl")
    scopes: Dict[str, str] = {}


SecurityDefinition = Union[BasicSecurityDefinition, OAuth2SecurityDefinition]


# ============================================================================
# Main Swagger Model
# ============================================================================


class SwaggerDocument(SwaggerModel):
    """
    Root Swagger 2.0 document.

    Sections are filled once per key while the converter walks the
    descriptor tree; `securityDefinitions` is left out when empty.
    """

    swagger: Literal["2.0"] = SWAGGER_VERSION
    info: Info = Info()
    host: Optional[str] = None
    base_path: Optional[str] = Field(None, alias="basePath")
    schemes: Optional[List[str]] = None
    paths: Dict[str, PathItem] = {}
    definitions: Dict[str, Dict[str, Any]] = {}
    security_definitions: Optional[Dict[str, SecurityDefinition]] = Field(
        None, alias="securityDefinitions"
    )
