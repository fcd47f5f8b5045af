"""raml2swagger - Convert RAML 0.8 API definitions to Swagger 2.0.

raml2swagger reads a RAML 0.8 document (from a file or URL, with
`!include` support), validates it into a typed descriptor tree and maps
it onto a Swagger 2.0 document: paths with inherited path parameters,
`$ref`-shared schema definitions, responses and security definitions.

Quick Start:
    >>> from raml2swagger import RamlLoader, convert
    >>>
    >>> raml = RamlLoader().load('./api.raml')
    >>> print(convert(raml))

CLI Usage:
    $ raml2swagger convert ./api.raml            # writes ./api.json
    $ raml2swagger convert ./api.raml out.json
    $ raml2swagger batch -c raml2swagger.yaml    # converts every configured document
"""

from importlib.metadata import PackageNotFoundError, version

from raml2swagger.config import ConverterConfig, DocumentConfig, get_config
from raml2swagger.convert import (
    DocumentAssembler,
    build_document,
    convert,
    convert_source,
)
from raml2swagger.exceptions import (
    ConfigurationError,
    ConversionError,
    MalformedSchemaError,
    OutputError,
    ParameterError,
    Raml2SwaggerError,
    RamlLoadError,
    RamlValidationError,
    SecuritySchemeError,
)
from raml2swagger.raml import Raml, RamlLoader
from raml2swagger.swagger import SwaggerDocument

__all__ = [
    # Main entry points
    'convert',
    'convert_source',
    'build_document',
    'DocumentAssembler',
    'RamlLoader',
    # Models
    'Raml',
    'SwaggerDocument',
    # Configuration
    'ConverterConfig',
    'DocumentConfig',
    'get_config',
    # Exceptions
    'Raml2SwaggerError',
    'ConversionError',
    'MalformedSchemaError',
    'ParameterError',
    'SecuritySchemeError',
    'RamlLoadError',
    'RamlValidationError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = version('raml2swagger')
except PackageNotFoundError:
    __version__ = 'unknown'
