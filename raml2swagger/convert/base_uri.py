"""Base URI handling.

Swagger's `host` and `basePath` cannot hold URI templates while RAML's
`baseUri` can. Templated path segments are therefore hoisted out of the
base path and prepended to every generated path instead.
"""

import logging
import re
from dataclasses import dataclass
from urllib.parse import urlparse

from raml2swagger.utils import is_url

logger = logging.getLogger(__name__)

__all__ = ['BaseUri', 'parse_base_uri', 'split_base_path']

TEMPLATE_VARIABLE = re.compile(r'\{([^{}]+)\}')


@dataclass(frozen=True)
class BaseUri:
    """The parts of a RAML base URI that Swagger can express."""

    host: str
    scheme: str
    base_path: str
    hoisted_prefix: str = ''

    @property
    def hoisted_parameters(self) -> list[str]:
        """Names of the template variables in the hoisted prefix."""
        return TEMPLATE_VARIABLE.findall(self.hoisted_prefix)


def split_base_path(path: str) -> tuple[str, str]:
    """Split a base URI path into a static base path and a hoisted prefix.

    Segments holding a template variable form the hoisted prefix, the
    remaining segments form the base path, both in their original order:

        >>> split_base_path('/api/{version}')
        ('/api', '/{version}')
        >>> split_base_path('/{version}/svc')
        ('/svc', '/{version}')
    """
    segments = [segment for segment in path.split('/') if segment]
    static = [segment for segment in segments if '{' not in segment]
    templated = [segment for segment in segments if '{' in segment]
    return '/' + '/'.join(static), ''.join(f'/{segment}' for segment in templated)


def parse_base_uri(base_uri: str | None) -> BaseUri | None:
    """Parse a RAML base URI.

    Returns None, after logging a warning, when the base URI is not an
    absolute URL; the document then goes without host and base path.
    """
    if not base_uri:
        return None

    if not is_url(base_uri):
        logger.warning(f"Base URI '{base_uri}' is not an absolute URL, omitting host")
        return None

    parsed = urlparse(base_uri)
    try:
        parsed.port
    except ValueError:
        logger.warning(f"Base URI '{base_uri}' has an invalid port, omitting host")
        return None

    base_path, hoisted_prefix = split_base_path(parsed.path)
    return BaseUri(
        host=parsed.netloc.rpartition('@')[2],
        scheme=parsed.scheme.lower(),
        base_path=base_path,
        hoisted_prefix=hoisted_prefix,
    )
