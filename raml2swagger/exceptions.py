"""Custom exceptions for raml2swagger.

This module defines the hierarchy of exceptions raised while loading RAML
documents, converting them to Swagger 2.0 and writing the result.
"""


class Raml2SwaggerError(Exception):
    """Base exception for all raml2swagger errors.

    Example:
        try:
            text = convert(raml)
        except Raml2SwaggerError as e:
            print(f"raml2swagger error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConversionError(Raml2SwaggerError):
    """Structural failure while assembling the Swagger document.

    A conversion error aborts the whole conversion; no partial document
    is ever returned.

    Attributes:
        context: What was being converted when the failure happened.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while converting {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class MalformedSchemaError(ConversionError):
    """A body or response schema is present but is not valid JSON.

    Attributes:
        schema: The offending schema text (or schema name).
    """

    def __init__(self, schema: str, cause: Exception | None = None):
        self.schema = schema
        preview = schema if len(schema) <= 40 else schema[:37] + '...'
        super().__init__(
            f"Schema is neither a declared schema name nor valid JSON: '{preview}'",
            cause=cause,
        )


class ParameterError(ConversionError):
    """A parameter carries a malformed constraint value.

    Attributes:
        name: The parameter name.
        field: The constraint field that is malformed.
        value: The offending value.
    """

    def __init__(self, name: str, field: str, value: object):
        self.name = name
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid value {value!r} for '{field}'", context=f"parameter '{name}'"
        )


class SecuritySchemeError(ConversionError):
    """A security scheme declaration is missing required settings.

    Attributes:
        scheme: The declared scheme name.
        reason: Explanation of what is missing.
    """

    def __init__(self, scheme: str, reason: str):
        self.scheme = scheme
        self.reason = reason
        super().__init__(reason, context=f"security scheme '{scheme}'")


class RamlLoadError(Raml2SwaggerError):
    """Failed to read or parse a RAML document.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | str | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load RAML from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class RamlValidationError(Raml2SwaggerError):
    """The parsed RAML does not fit the descriptor tree model.

    Attributes:
        source: The source path or URL of the document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"RAML validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ConfigurationError(Raml2SwaggerError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(Raml2SwaggerError):
    """Error writing the converted document.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
