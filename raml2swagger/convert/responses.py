"""Response mapping for RAML actions."""

import logging
from collections.abc import Mapping

from raml2swagger.convert.schemas import SchemaRegistry
from raml2swagger.raml.model import Response as RamlResponse
from raml2swagger.swagger.models import Response

logger = logging.getLogger(__name__)

__all__ = ['DEFAULT_RESPONSES', 'REASON_PHRASES', 'ResponseMapper', 'reason_phrase']

REASON_PHRASES: dict[int, str] = {
    100: 'Continue',
    101: 'Switching Protocols',
    103: 'Checkpoint',
    200: 'OK',
    201: 'Created',
    202: 'Accepted',
    203: 'Non-Authoritative Information',
    204: 'No Content',
    205: 'Reset Content',
    206: 'Partial Content',
    300: 'Multiple Choices',
    301: 'Moved Permanently',
    302: 'Found',
    303: 'See Other',
    304: 'Not Modified',
    306: 'Switch Proxy',
    307: 'Temporary Redirect',
    308: 'Resume Incomplete',
    400: 'Bad Request',
    401: 'Unauthorized',
    402: 'Payment Required',
    403: 'Forbidden',
    404: 'Not Found',
    405: 'Method Not Allowed',
    406: 'Not Acceptable',
    407: 'Proxy Authentication Required',
    408: 'Request Timeout',
    409: 'Conflict',
    410: 'Gone',
    411: 'Length Required',
    412: 'Precondition Failed',
    413: 'Request Entity Too Large',
    414: 'Request-URI Too Long',
    415: 'Unsupported Media Type',
    416: 'Requested Range Not Satisfiable',
    417: 'Expectation Failed',
    500: 'Internal Server Error',
    501: 'Not Implemented',
    502: 'Bad Gateway',
    503: 'Service Unavailable',
    504: 'Gateway Timeout',
    505: 'HTTP Version Not Supported',
    511: 'Network Authentication Required',
}

# Used when an action declares no responses
DEFAULT_STATUS_CODE = '200'
DEFAULT_RESPONSES = {DEFAULT_STATUS_CODE: REASON_PHRASES[200]}


def reason_phrase(status_code: str) -> str | None:
    """Standard reason phrase for a status code, or None if unknown."""
    try:
        return REASON_PHRASES.get(int(status_code))
    except ValueError:
        return None


class ResponseMapper:
    """Builds the per-status-code response map of one action.

    Example:
        >>> mapper = ResponseMapper(SchemaRegistry())
        >>> mapper.map_responses(action.responses)
        {'200': Response(description='OK', schema_=None)}
    """

    def __init__(self, schemas: SchemaRegistry):
        """Initialize the response mapper.

        Args:
            schemas: Registry used to resolve response body schemas.
        """
        self.schemas = schemas

    def map_responses(self, responses: Mapping[str, RamlResponse]) -> dict[str, Response]:
        """Map every declared response.

        An action without responses gets a single "200 OK" response.

        Raises:
            MalformedSchemaError: If a declared schema is not valid JSON.
        """
        if not responses:
            return {
                code: Response(description=description)
                for code, description in DEFAULT_RESPONSES.items()
            }

        return {
            str(code): self.map_response(str(code), response)
            for code, response in responses.items()
        }

    def map_response(self, status_code: str, response: RamlResponse) -> Response:
        """Map one response.

        The description falls back to the standard reason phrase and is
        left out when the status code has none.
        """
        description = response.description
        if description is None:
            description = reason_phrase(status_code)
            if description is None:
                logger.debug(
                    f'No description or reason phrase for status code {status_code}'
                )

        schema = None
        for body in response.body.values():
            if body.schema_:
                schema = self.schemas.resolve(body.schema_)
                break

        return Response(description=description, schema_=schema)
