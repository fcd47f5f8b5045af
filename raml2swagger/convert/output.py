"""Serialization and writing of converted documents."""

import json
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import urlparse

from upath import UPath

from raml2swagger.exceptions import OutputError
from raml2swagger.swagger.models import SwaggerModel
from raml2swagger.utils import is_url

__all__ = ['DEFAULT_INDENT', 'default_output_path', 'dumps', 'write_output']

DEFAULT_INDENT = 2
DEFAULT_SUFFIX = '.json'


def dumps(document: SwaggerModel | dict[str, Any], indent: int = DEFAULT_INDENT) -> str:
    """Render a document as indented JSON text.

    Non-ASCII characters are kept as UTF-8 and forward slashes are never
    escaped, so the output diffs cleanly between runs.
    """
    data = document.to_dict() if isinstance(document, SwaggerModel) else document
    return json.dumps(data, indent=indent, ensure_ascii=False)


def default_output_path(source: str, suffix: str = DEFAULT_SUFFIX) -> str:
    """Output path for a source: its file name with the extension replaced.

    For URL sources the last path segment is used, relative to the
    current directory.
    """
    if is_url(source):
        name = PurePosixPath(urlparse(source).path).name or 'swagger'
        return str(Path(name).with_suffix(suffix))
    return str(Path(source).with_suffix(suffix))


def write_output(text: str, destination: str | Path | UPath) -> UPath:
    """Write converted text to a local or remote destination.

    Args:
        text: The document text.
        destination: Path or URL understood by universal_pathlib.

    Returns:
        The path written to.

    Raises:
        OutputError: If the destination cannot be created or written.
    """
    path = UPath(destination)
    if not text.endswith('\n'):
        text += '\n'

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
    except (OSError, ValueError) as e:
        raise OutputError(str(destination), cause=e) from e

    return path
