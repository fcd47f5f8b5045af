import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from raml2swagger.config import ConverterConfig, DocumentConfig, get_config
from raml2swagger.convert import convert, default_output_path, write_output
from raml2swagger.exceptions import OutputError, Raml2SwaggerError
from raml2swagger.raml import RamlLoader

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name='raml2swagger',
    help='Convert RAML 0.8 API definitions to Swagger 2.0',
    no_args_is_help=True,
)

logger = logging.getLogger('raml2swagger')


def _configure_logging(level: str, verbose: bool) -> None:
    logger.handlers = [RichHandler(console=err_console, show_path=False)]
    logger.setLevel(logging.DEBUG if verbose else level.upper())


def _convert_document(document: DocumentConfig, config: ConverterConfig) -> None:
    """Convert one document, printing it when the destination is not writable."""
    output = document.output or default_output_path(
        document.source, config.output_suffix
    )

    logger.info(f'Converting {document.source}...')
    raml = RamlLoader().load(document.source)
    text = convert(raml, indent=config.indent)

    try:
        path = write_output(text, output)
    except OutputError as e:
        logger.warning(f'{e}, falling back to standard output')
        typer.echo(text)
        return

    console.print(f'[green]Converted[/green] {document.source} -> {path}')


@app.command('convert')
def convert_command(
    source: Annotated[str, typer.Argument(help='Path or URL of the RAML document')],
    output: Annotated[
        str | None,
        typer.Argument(help='Output path (defaults to SOURCE with a .json extension)'),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    indent: Annotated[
        int | None, typer.Option('--indent', help='JSON indentation width')
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Convert a single RAML document.

    Examples:
        raml2swagger convert api.raml
        raml2swagger convert api.raml build/swagger.json
        raml2swagger convert https://example.com/api.raml -c raml2swagger.yaml
    """
    try:
        settings = get_config(config)
        if indent is not None:
            settings.indent = indent
        _configure_logging(settings.log_level, verbose)

        _convert_document(DocumentConfig(source=source, output=output), settings)
    except Raml2SwaggerError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def batch(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML or JSON)'
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging')
    ] = False,
) -> None:
    """Convert every document listed in the configuration.

    If no config file is specified, will look for default config files
    in the current directory or the [tool.raml2swagger] table of
    pyproject.toml.
    """
    try:
        settings = get_config(config)
        _configure_logging(settings.log_level, verbose)

        if not settings.documents:
            console.print('[red]Error:[/red] no documents configured')
            raise typer.Exit(1)

        for document in settings.documents:
            _convert_document(document, settings)
    except Raml2SwaggerError as e:
        console.print(f'[red]Error:[/red] {e}')
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of raml2swagger."""
    from raml2swagger import __version__

    console.print(f'raml2swagger version: {__version__}')


if __name__ == '__main__':
    app()
