"""Tests for loading RAML documents from files, URLs and text."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from raml2swagger.exceptions import RamlLoadError, RamlValidationError
from raml2swagger.raml.loader import SUPPORTED_RAML_VERSION, RamlLoader

from .fixtures import (
    INCLUDE_RAML,
    INCLUDED_RESOURCE,
    MINIMAL_RAML,
    UNSUPPORTED_VERSION_RAML,
    WIDGET_SCHEMA,
)


@pytest.fixture
def include_dir(tmp_path):
    (tmp_path / 'api.raml').write_text(INCLUDE_RAML, encoding='utf-8')
    (tmp_path / 'widget.json').write_text(WIDGET_SCHEMA, encoding='utf-8')
    (tmp_path / 'widgets.raml').write_text(INCLUDED_RESOURCE, encoding='utf-8')
    return tmp_path


def mock_client(documents):
    """HTTP client serving `documents` keyed by URL path, 404 otherwise."""

    def handler(request):
        if request.url.path in documents:
            return httpx.Response(200, text=documents[request.url.path])
        return httpx.Response(404)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestLoadText:
    """Tests for RamlLoader.load_text."""

    def test_minimal(self):
        raml = RamlLoader().load_text(MINIMAL_RAML)

        assert raml.title == 'Minimal API'
        assert raml.resources == {}

    def test_missing_header_is_tolerated(self):
        raml = RamlLoader().load_text('title: No Header\n')

        assert raml.title == 'No Header'

    def test_unsupported_version(self):
        with pytest.raises(RamlLoadError) as exc_info:
            RamlLoader().load_text(UNSUPPORTED_VERSION_RAML)

        assert "unsupported RAML version '1.0'" in str(exc_info.value)
        assert SUPPORTED_RAML_VERSION in str(exc_info.value)

    def test_invalid_yaml(self):
        with pytest.raises(RamlLoadError):
            RamlLoader().load_text('#%RAML 0.8\ntitle: [unclosed\n')

    def test_root_must_be_a_mapping(self):
        with pytest.raises(RamlLoadError, match='not a mapping'):
            RamlLoader().load_text('#%RAML 0.8\n- a\n- b\n')

    def test_validation_errors_are_collected(self):
        text = '#%RAML 0.8\n/items:\n  get:\n    queryParameters:\n      q:\n        type: object\n'

        with pytest.raises(RamlValidationError) as exc_info:
            RamlLoader().load_text(text, source='api.raml')

        assert exc_info.value.source == 'api.raml'
        assert len(exc_info.value.errors) == 1
        assert 'q' in exc_info.value.errors[0]

    def test_includes_resolve_against_base_path(self, include_dir):
        loader = RamlLoader(base_path=include_dir)

        raml = loader.load_text(INCLUDE_RAML)

        assert 'get' in raml.resources['/widgets'].actions


class TestLoadFile:
    """Tests for loading from the file system."""

    def test_includes(self, include_dir):
        """Test that text and RAML includes are resolved next to the document."""
        raml = RamlLoader().load(str(include_dir / 'api.raml'))

        assert raml.schemas == [{'Widget': WIDGET_SCHEMA}]
        get = raml.resources['/widgets'].actions['get']
        assert get.responses['200'].body['application/json'].schema_ == 'Widget'

    def test_missing_file(self, tmp_path):
        with pytest.raises(RamlLoadError, match='file not found'):
            RamlLoader().load(str(tmp_path / 'missing.raml'))

    def test_invalid_utf8(self, tmp_path):
        source = tmp_path / 'api.raml'
        source.write_bytes(b'title: \xff\xfe\n')

        with pytest.raises(RamlLoadError) as exc_info:
            RamlLoader().load(str(source))

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_utf8_include(self, tmp_path):
        source = tmp_path / 'api.raml'
        source.write_text('#%RAML 0.8\nschemas:\n  - A: !include a.json\n')
        (tmp_path / 'a.json').write_bytes(b'\xff\xfe')

        with pytest.raises(RamlLoadError, match='a.json'):
            RamlLoader().load(str(source))

    def test_missing_include(self, tmp_path):
        source = tmp_path / 'api.raml'
        source.write_text('#%RAML 0.8\nschemas:\n  - A: !include a.json\n')

        with pytest.raises(RamlLoadError, match='a.json'):
            RamlLoader().load(str(source))


class TestLoadUrl:
    """Tests for loading over HTTP."""

    @patch('httpx.get')
    def test_load_url_without_client(self, mock_get):
        """Test loading over HTTP with the module-level httpx API."""
        mock_response = MagicMock()
        mock_response.text = MINIMAL_RAML
        mock_response.raise_for_status = MagicMock()
        mock_get.return_value = mock_response

        raml = RamlLoader().load('https://example.com/api.raml')

        assert raml.title == 'Minimal API'
        mock_get.assert_called_once_with(
            'https://example.com/api.raml', follow_redirects=True
        )

    def test_load_url(self):
        client = mock_client({'/api.raml': MINIMAL_RAML})

        raml = RamlLoader(http_client=client).load('https://example.com/api.raml')

        assert raml.title == 'Minimal API'

    def test_relative_includes_use_the_document_url(self):
        client = mock_client(
            {
                '/specs/api.raml': INCLUDE_RAML,
                '/specs/widget.json': WIDGET_SCHEMA,
                '/specs/widgets.raml': INCLUDED_RESOURCE,
            }
        )

        raml = RamlLoader(http_client=client).load('https://example.com/specs/api.raml')

        assert raml.schemas == [{'Widget': WIDGET_SCHEMA}]
        assert 'get' in raml.resources['/widgets'].actions

    def test_http_error(self):
        client = mock_client({})

        with pytest.raises(RamlLoadError) as exc_info:
            RamlLoader(http_client=client).load('https://example.com/api.raml')

        assert exc_info.value.source == 'https://example.com/api.raml'
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_connection_error(self):
        client = MagicMock()
        client.get.side_effect = httpx.ConnectError('refused')

        with pytest.raises(RamlLoadError, match='refused'):
            RamlLoader(http_client=client).load('https://example.com/api.raml')
