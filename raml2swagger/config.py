import json
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from raml2swagger.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['raml2swagger.yaml', 'raml2swagger.yml']


class DocumentConfig(BaseModel):
    """Represents a single RAML document to be converted."""

    source: str = Field(..., description='Path or URL to the RAML document.')

    output: str | None = Field(
        None,
        description='Output path for the Swagger document. Defaults to the source '
        'name with its extension replaced.',
    )


class ConverterConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='RAML2SWAGGER_')

    documents: list[DocumentConfig] = Field(
        default_factory=list, description='List of RAML documents to convert.'
    )

    indent: int = Field(2, ge=0, description='JSON indentation width.')

    output_suffix: str = Field(
        '.json', description='Extension given to default output paths.'
    )

    log_level: str = Field('INFO', description='Logging level used by the CLI.')


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text(encoding='utf-8')) or {}


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text(encoding='utf-8'))


def _validate(data: dict, config_path: str) -> ConverterConfig:
    try:
        return ConverterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f'Invalid configuration: {e}', config_path) from e


def get_config(path: str | None = None) -> ConverterConfig:
    """Load configuration from a file, pyproject.toml or the environment.

    Lookup order: the explicit `path`, a default config file in the current
    directory, the `[tool.raml2swagger]` table of pyproject.toml, and
    finally defaults (plus `RAML2SWAGGER_*` environment variables).
    """
    if path:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError('Configuration file not found', str(path))
        try:
            if config_path.suffix == '.json':
                data = load_json(config_path)
            else:
                data = load_yaml(config_path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f'Cannot read configuration: {e}', str(path)) from e
        return _validate(data, str(path))

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        config_path = Path(cwd) / filename
        if config_path.exists():
            try:
                data = load_yaml(config_path)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigurationError(
                    f'Cannot read configuration: {e}', str(config_path)
                ) from e
            return _validate(data, str(config_path))

    config_path = Path(cwd) / 'pyproject.toml'

    if config_path.exists():
        import tomllib

        pyproject = tomllib.loads(config_path.read_text(encoding='utf-8'))
        tools = pyproject.get('tool', {})

        if 'raml2swagger' in tools:
            return _validate(tools['raml2swagger'], str(config_path))

    return ConverterConfig()
