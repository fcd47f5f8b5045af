"""Document assembly for RAML to Swagger conversion.

This module provides the DocumentAssembler class that orchestrates the
conversion of one RAML descriptor tree into a Swagger 2.0 document, and
the `convert` entry point built on top of it.
"""

import logging

from pydantic import ValidationError

from raml2swagger.convert.base_uri import BaseUri, parse_base_uri
from raml2swagger.convert.output import DEFAULT_INDENT, dumps
from raml2swagger.convert.parameters import ParameterMapper
from raml2swagger.convert.resources import ResourceTreeWalker
from raml2swagger.convert.responses import ResponseMapper
from raml2swagger.convert.schemas import SchemaRegistry
from raml2swagger.convert.security import SecuritySchemeMapper
from raml2swagger.exceptions import ConversionError
from raml2swagger.raml.loader import RamlLoader
from raml2swagger.raml.model import Raml, UriParameter
from raml2swagger.swagger.models import Info, SwaggerDocument

logger = logging.getLogger(__name__)

__all__ = ['DocumentAssembler', 'build_document', 'convert', 'convert_source']

DOCUMENTATION_SEPARATOR = ' | '


class DocumentAssembler:
    """Assembles the Swagger document for one RAML descriptor tree.

    An assembler holds the per-conversion state (schema registry and
    mappers) and is meant to be used for a single conversion; nothing is
    shared between assemblers.

    Attributes:
        raml: The descriptor tree being converted.
        schemas: Registry of the document's named schemas.

    Example:
        >>> assembler = DocumentAssembler(raml)
        >>> document = assembler.assemble()
        >>> document.to_dict()['swagger']
        '2.0'
    """

    def __init__(self, raml: Raml):
        self.raml = raml
        self.schemas = SchemaRegistry()
        self.parameters = ParameterMapper(self.schemas)
        self.responses = ResponseMapper(self.schemas)
        self.security = SecuritySchemeMapper()

    def assemble(self) -> SwaggerDocument:
        """Build the document.

        Raises:
            ConversionError: If any part of the tree is structurally
                malformed; no partial document is produced.
        """
        base_uri = parse_base_uri(self.raml.base_uri)

        # Definitions first, so bodies naming a schema resolve to a $ref
        self.schemas.register_all(self.raml.schemas)

        walker = ResourceTreeWalker(
            self.parameters,
            self.responses,
            hoisted_prefix=base_uri.hoisted_prefix if base_uri else '',
            root_parameters=self._root_parameters(base_uri),
        )
        paths = walker.walk(self.raml.resources)

        security_definitions = self.security.map_all(self.raml.security_schemes)

        logger.debug(
            f'Assembled {len(paths)} paths, {len(self.schemas)} definitions, '
            f'{len(security_definitions)} security definitions'
        )

        return SwaggerDocument(
            info=self._info(),
            host=base_uri.host if base_uri else None,
            base_path=base_uri.base_path if base_uri else None,
            schemes=self._schemes(base_uri),
            paths=paths,
            definitions=self.schemas.definitions,
            security_definitions=security_definitions or None,
        )

    def _info(self) -> Info:
        raml = self.raml
        description = None
        if raml.documentation:
            description = DOCUMENTATION_SEPARATOR.join(
                f'{item.title} - {item.content}' for item in raml.documentation
            )

        return Info(
            title=raml.title or None,
            version=raml.version,
            description=description,
        )

    def _schemes(self, base_uri: BaseUri | None) -> list[str] | None:
        """Declared protocols win over the base URI's own scheme."""
        if self.raml.protocols:
            return [protocol.lower() for protocol in self.raml.protocols]
        if base_uri:
            return [base_uri.scheme]
        return None

    def _root_parameters(self, base_uri: BaseUri | None) -> dict[str, UriParameter]:
        """Base URI parameters, visible to every path once a prefix is hoisted.

        Template variables of the prefix that are not declared (such as
        RAML's implicit `version`) become plain required string parameters.
        """
        if not base_uri or not base_uri.hoisted_prefix:
            return {}

        parameters = dict(self.raml.base_uri_parameters)
        for name in base_uri.hoisted_parameters:
            parameters.setdefault(name, UriParameter())
        return parameters


def build_document(raml: Raml) -> SwaggerDocument:
    """Convert a descriptor tree into a Swagger document model.

    Raises:
        ConversionError: If the tree cannot be converted.
    """
    try:
        return DocumentAssembler(raml).assemble()
    except ValidationError as e:
        raise ConversionError('Failed to assemble the Swagger document', cause=e) from e


def convert(raml: Raml, indent: int = DEFAULT_INDENT) -> str:
    """Convert a descriptor tree into Swagger 2.0 JSON text.

    Args:
        raml: The RAML 0.8 descriptor tree.
        indent: JSON indentation width.

    Returns:
        The Swagger document as JSON text.

    Raises:
        ConversionError: If the tree cannot be converted.
    """
    return dumps(build_document(raml), indent=indent)


def convert_source(
    source: str, indent: int = DEFAULT_INDENT, loader: RamlLoader | None = None
) -> str:
    """Load a RAML document from a path or URL and convert it.

    Raises:
        RamlLoadError: If the document cannot be read.
        RamlValidationError: If the document does not fit the model.
        ConversionError: If the tree cannot be converted.
    """
    raml = (loader or RamlLoader()).load(source)
    return convert(raml, indent=indent)
