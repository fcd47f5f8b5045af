"""Swagger 2.0 output models."""

from raml2swagger.swagger.models import (
    SWAGGER_VERSION,
    BasicSecurityDefinition,
    Info,
    Items,
    OAuth2Flow,
    OAuth2SecurityDefinition,
    Operation,
    Parameter,
    ParameterLocation,
    PathItem,
    Response,
    SecurityDefinition,
    SecuritySchemeType,
    SwaggerDocument,
)

__all__ = [
    # Main model
    'SwaggerDocument',
    'SWAGGER_VERSION',
    # Info models
    'Info',
    # Parameter models
    'Parameter',
    'Items',
    # Response & operation models
    'Response',
    'Operation',
    'PathItem',
    # Security models
    'SecurityDefinition',
    'BasicSecurityDefinition',
    'OAuth2SecurityDefinition',
    # Enums
    'ParameterLocation',
    'SecuritySchemeType',
    'OAuth2Flow',
]
