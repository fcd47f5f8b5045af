"""Test suite for raml2swagger exceptions."""

import pytest

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


class TestRaml2SwaggerError:
    """Tests for the base exception."""

    def test_basic_message(self):
        error = Raml2SwaggerError('Something went wrong')

        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    @pytest.mark.parametrize(
        'error',
        [
            ConversionError('x'),
            MalformedSchemaError('x'),
            ParameterError('x', 'minimum', 'y'),
            SecuritySchemeError('x', 'y'),
            RamlLoadError('x'),
            RamlValidationError('x'),
            ConfigurationError('x'),
            OutputError('x'),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, Raml2SwaggerError)


class TestConversionErrors:
    """Tests for structural conversion errors."""

    def test_context_and_cause(self):
        error = ConversionError('Boom', context='resource /a', cause=ValueError('bad'))

        assert str(error) == 'Boom (while converting resource /a): bad'
        assert isinstance(error.cause, ValueError)

    def test_malformed_schema_preview(self):
        error = MalformedSchemaError('a' * 50)

        assert error.schema == 'a' * 50
        assert f"'{'a' * 37}...'" in str(error)
        assert isinstance(error, ConversionError)

    def test_parameter_error(self):
        error = ParameterError('page', 'minimum', 'low')

        assert str(error) == (
            "Invalid value 'low' for 'minimum' (while converting parameter 'page')"
        )

    def test_security_scheme_error(self):
        error = SecuritySchemeError('oauth', "missing 'accessTokenUri' setting")

        assert error.scheme == 'oauth'
        assert str(error) == (
            "missing 'accessTokenUri' setting (while converting security scheme 'oauth')"
        )


class TestIOErrors:
    """Tests for loading, configuration and output errors."""

    def test_load_error(self):
        error = RamlLoadError('api.raml', 'file not found')

        assert str(error) == "Failed to load RAML from 'api.raml': file not found"

    def test_load_error_without_cause(self):
        assert str(RamlLoadError('api.raml')) == "Failed to load RAML from 'api.raml'"

    def test_validation_error(self):
        error = RamlValidationError('api.raml', ['a: bad', 'b: worse'])

        assert error.errors == ['a: bad', 'b: worse']
        assert str(error) == "RAML validation failed for 'api.raml': a: bad; b: worse"

    def test_configuration_error(self):
        error = ConfigurationError('Bad value', 'config.yaml', 'indent')

        assert str(error) == "Bad value in 'config.yaml' (field: indent)"

    def test_output_error(self):
        error = OutputError('out.json', PermissionError('denied'))

        assert str(error) == "Failed to write output to 'out.json': denied"
