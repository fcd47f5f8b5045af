"""RAML 0.8 descriptor tree models and loader."""

from raml2swagger.raml.loader import SUPPORTED_RAML_VERSION, RamlLoader
from raml2swagger.raml.model import (
    DEFAULT_MEDIA_TYPE,
    HTTP_METHODS,
    AbstractParam,
    Action,
    DocumentationItem,
    Header,
    MimeType,
    ParamType,
    QueryParameter,
    Raml,
    Resource,
    Response,
    SecurityScheme,
    UriParameter,
)

__all__ = [
    # Main model
    'Raml',
    # Tree nodes
    'Resource',
    'Action',
    'MimeType',
    'Response',
    'DocumentationItem',
    'SecurityScheme',
    # Parameters
    'AbstractParam',
    'UriParameter',
    'Header',
    'QueryParameter',
    'ParamType',
    # Loading
    'RamlLoader',
    'SUPPORTED_RAML_VERSION',
    # Constants
    'DEFAULT_MEDIA_TYPE',
    'HTTP_METHODS',
]
