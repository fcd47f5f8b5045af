"""RAML 0.8 to Swagger 2.0 conversion engine.

The engine is split into small mappers that the DocumentAssembler drives:

- ParameterMapper: URI, header, query parameters and request bodies
- SchemaRegistry: named schemas and `$ref` resolution
- SecuritySchemeMapper: Basic and OAuth 2.0 security definitions
- ResponseMapper: per-status-code responses
- ResourceTreeWalker: the resource tree and inherited path parameters
"""

from raml2swagger.convert.assembler import (
    DocumentAssembler,
    build_document,
    convert,
    convert_source,
)
from raml2swagger.convert.base_uri import BaseUri, parse_base_uri, split_base_path
from raml2swagger.convert.output import default_output_path, dumps, write_output
from raml2swagger.convert.parameters import ParameterMapper
from raml2swagger.convert.resources import ParameterScope, ResourceTreeWalker
from raml2swagger.convert.responses import REASON_PHRASES, ResponseMapper
from raml2swagger.convert.schemas import SchemaRegistry, strip_legacy_required_markers
from raml2swagger.convert.security import SecuritySchemeMapper

__all__ = [
    # Entry points
    'convert',
    'convert_source',
    'build_document',
    'DocumentAssembler',
    # Mappers
    'ParameterMapper',
    'ResponseMapper',
    'SchemaRegistry',
    'SecuritySchemeMapper',
    'ResourceTreeWalker',
    'ParameterScope',
    # Base URI
    'BaseUri',
    'parse_base_uri',
    'split_base_path',
    # Output
    'dumps',
    'write_output',
    'default_output_path',
    # Constants and helpers
    'REASON_PHRASES',
    'strip_legacy_required_markers',
]
