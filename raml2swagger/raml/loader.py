"""RAML loading utilities.

This module reads RAML 0.8 documents from local files or URLs, resolves
`!include` tags and validates the result into the descriptor tree models.
"""

import logging
from pathlib import Path
from urllib.parse import urljoin

import httpx
import yaml
from pydantic import ValidationError

from raml2swagger.exceptions import RamlLoadError, RamlValidationError
from raml2swagger.raml.model import Raml
from raml2swagger.utils import is_url

logger = logging.getLogger(__name__)

__all__ = ['RamlLoader', 'SUPPORTED_RAML_VERSION']

SUPPORTED_RAML_VERSION = '0.8'

# Included files with these suffixes are parsed, anything else is inlined as text
YAML_SUFFIXES = {'.raml', '.yaml', '.yml'}


class IncludeLoader(yaml.SafeLoader):
    """YAML safe loader that knows where the document being parsed lives."""

    def __init__(self, stream, location: str, raml_loader: 'RamlLoader'):
        super().__init__(stream)
        self.location = location
        self.raml_loader = raml_loader


def _construct_include(loader: IncludeLoader, node: yaml.Node):
    target = loader.construct_scalar(node)
    return loader.raml_loader.resolve_include(loader.location, target)


IncludeLoader.add_constructor('!include', _construct_include)


class RamlLoader:
    """Loads RAML 0.8 documents from URLs or file paths.

    Example:
        >>> loader = RamlLoader()
        >>> raml = loader.load('./api.raml')
        >>> # or
        >>> raml = loader.load('https://api.example.com/api.raml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the RAML loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
            base_path: Directory used to resolve `!include` targets of
                       documents loaded from text. Defaults to the
                       current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> Raml:
        """Load and validate a RAML document from a URL or file path.

        Args:
            source: URL or file path of the RAML document.

        Returns:
            The validated descriptor tree.

        Raises:
            RamlLoadError: If the document cannot be read or parsed.
            RamlValidationError: If the document does not fit the model.
        """
        logger.debug(f'Loading RAML from {source}')
        text = self._read(source)
        return self._build(text, source)

    def load_text(self, text: str, source: str = '<string>') -> Raml:
        """Load and validate a RAML document from text.

        `!include` targets are resolved against the loader's base path.
        """
        return self._build(text, source, location=str(self._base_path / '_'))

    def _build(self, text: str, source: str, location: str | None = None) -> Raml:
        self._check_version(text, source)
        data = self._parse_yaml(text, location or source, source)

        if not isinstance(data, dict):
            raise RamlLoadError(source, 'document root is not a mapping')

        try:
            return Raml.from_raml(data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise RamlValidationError(source, errors) from e

    def _check_version(self, text: str, source: str) -> None:
        """Reject documents whose `#%RAML` header names another version."""
        first_line = next((line for line in text.splitlines() if line.strip()), '')
        if not first_line.startswith('#%RAML'):
            logger.debug(f'No #%RAML header in {source}, assuming {SUPPORTED_RAML_VERSION}')
            return

        version = first_line[len('#%RAML'):].strip()
        if version != SUPPORTED_RAML_VERSION:
            raise RamlLoadError(
                source,
                f"unsupported RAML version '{version}', "
                f'only {SUPPORTED_RAML_VERSION} is supported',
            )

    def _parse_yaml(self, text: str, location: str, source: str):
        loader = IncludeLoader(text, location, self)
        try:
            return loader.get_single_data()
        except yaml.YAMLError as e:
            raise RamlLoadError(source, e) from e
        finally:
            loader.dispose()

    def resolve_include(self, location: str, target: str):
        """Resolve an `!include` target relative to the including document."""
        if is_url(target):
            resolved = target
        elif is_url(location):
            resolved = urljoin(location, target)
        else:
            resolved = str(Path(location).parent / target)

        logger.debug(f'Including {resolved}')
        text = self._read(resolved)

        if Path(resolved.split('?')[0]).suffix.lower() in YAML_SUFFIXES:
            return self._parse_yaml(text, resolved, resolved)
        return text

    def _read(self, source: str) -> str:
        if is_url(source):
            return self._read_url(source)
        return self._read_file(source)

    def _read_url(self, url: str) -> str:
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise RamlLoadError(url, e) from e
        return response.text

    def _read_file(self, file_path: str) -> str:
        path = Path(file_path)
        if not path.exists():
            raise RamlLoadError(file_path, 'file not found')
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise RamlLoadError(file_path, e) from e
