"""Tests for the RAML descriptor tree models."""

import json

import pytest
import yaml
from pydantic import ValidationError

from raml2swagger.raml.model import (
    DEFAULT_MEDIA_TYPE,
    Action,
    Header,
    ParamType,
    QueryParameter,
    Raml,
    Resource,
    UriParameter,
)

from .fixtures import NESTED_RAML, WIDGET_RAML_DATA


class TestRaml:
    """Tests for the root model."""

    def test_resources_are_collected(self):
        raml = Raml.from_raml(yaml.safe_load(NESTED_RAML))

        assert list(raml.resources) == ['/a/{x}', '/empty']
        assert list(raml.resources['/a/{x}'].resources) == ['/b/{y}', '/c/{z}']
        assert raml.resources['/empty'].actions == {}

    def test_scalar_fields(self):
        raml = Raml.from_raml(WIDGET_RAML_DATA)

        assert raml.title == 'Widget API'
        assert raml.base_uri == 'http://widgets.example.com/api'
        assert raml.protocols == ['HTTP', 'HTTPS']
        assert [item.title for item in raml.documentation] == ['Overview', 'Auth']

    def test_numeric_version_becomes_string(self):
        raml = Raml.from_raml(yaml.safe_load('title: API\nversion: 1.0\n'))

        assert raml.version == '1.0'

    def test_null_title(self):
        assert Raml.from_raml({'title': None}).title == ''

    def test_single_schema_mapping_is_wrapped(self):
        raml = Raml.from_raml({'schemas': {'Tag': '{"type": "string"}'}})

        assert raml.schemas == [{'Tag': '{"type": "string"}'}]

    def test_yaml_written_schema_is_kept_as_json(self):
        raml = Raml.from_raml({'schemas': [{'Tag': {'type': 'string'}}]})

        assert json.loads(raml.schemas[0]['Tag']) == {'type': 'string'}

    def test_security_schemes(self):
        raml = Raml.from_raml(WIDGET_RAML_DATA)

        [basic, oauth] = raml.security_schemes
        assert basic['basic'].type == 'Basic Authentication'
        assert oauth['oauth'].settings['authorizationGrants'] == ['code', 'token']

    def test_base_uri_parameters_default_to_required(self):
        raml = Raml.from_raml({'baseUriParameters': {'version': None}})

        assert raml.base_uri_parameters['version'].required is True


class TestResource:
    """Tests for resource key splitting."""

    def test_methods_and_children(self):
        resource = Resource.model_validate(
            {
                'displayName': 'Widgets',
                'GET': {'description': 'List'},
                'post': None,
                '/{id}': {'delete': {}},
            }
        )

        assert resource.display_name == 'Widgets'
        assert list(resource.actions) == ['get', 'post']
        assert resource.actions['get'].description == 'List'
        assert list(resource.resources['/{id}'].actions) == ['delete']

    def test_unknown_keys_are_ignored(self):
        resource = Resource.model_validate({'is': ['paged'], 'type': 'collection'})

        assert resource.actions == {}
        assert resource.resources == {}


class TestAction:
    """Tests for action normalization."""

    def test_status_codes_become_strings(self):
        action = Action.model_validate({'responses': {200: None, 404: {}}})

        assert list(action.responses) == ['200', '404']

    def test_body_without_media_type_uses_default(self):
        action = Action.model_validate({'body': {'schema': 'Widget'}})

        assert list(action.body) == [DEFAULT_MEDIA_TYPE]
        assert action.body[DEFAULT_MEDIA_TYPE].schema_ == 'Widget'

    def test_body_without_media_type_uses_document_media_type(self):
        raml = Raml.from_raml(
            {
                'mediaType': 'application/xml',
                '/items': {
                    'post': {
                        'body': {'schema': 'Item'},
                        'responses': {200: {'body': {'example': '<item/>'}}},
                    }
                },
            }
        )

        post = raml.resources['/items'].actions['post']
        assert list(post.body) == ['application/xml']
        assert list(post.responses['200'].body) == ['application/xml']

    def test_inline_yaml_schema_is_serialized(self):
        action = Action.model_validate(
            {'body': {'application/json': {'schema': {'type': 'object'}}}}
        )

        assert json.loads(action.body['application/json'].schema_) == {'type': 'object'}

    def test_parameter_alternatives_keep_first(self):
        action = Action.model_validate(
            {'queryParameters': {'at': [{'type': 'date'}, {'type': 'string'}]}}
        )

        assert action.query_parameters['at'].type is ParamType.DATE


class TestParameters:
    """Tests for named parameter defaults and validation."""

    def test_required_defaults(self):
        assert UriParameter().required is True
        assert QueryParameter().required is False
        assert Header().required is False

    def test_type_is_case_insensitive(self):
        assert QueryParameter(type='BOOLEAN').type is ParamType.BOOLEAN

    def test_aliases(self):
        parameter = QueryParameter.model_validate(
            {'displayName': 'Page', 'minLength': 1, 'maxLength': 3}
        )

        assert parameter.display_name == 'Page'
        assert parameter.min_length == 1
        assert parameter.max_length == 3

    @pytest.mark.parametrize(
        'declaration', [{'type': 'object'}, {'minLength': -1}, {'minimum': 'low'}]
    )
    def test_invalid_declarations(self, declaration):
        with pytest.raises(ValidationError):
            QueryParameter.model_validate(declaration)
