import logging
import typing

import typer
from typer import Typer

from yml_generator.catalog import load_catalog
from yml_generator.configurator import load_settings
from yml_generator.exceptions import CatalogError, GenerationError
from yml_generator.generator import Generator

app = Typer(name="yml-generator", help="Generates YML (Yandex Market) feeds")
logger = logging.getLogger("cli")


@app.command("generate")
def generate(
    catalog_file: str = typer.Argument(..., help="JSON catalog file"),
    output: typing.Optional[str] = typer.Option(
        None, "--output", "-o", help="Feed file, stdout if not set"
    ),
    encoding: typing.Optional[str] = typer.Option(None, help="Encoding of the feed"),
    indent: typing.Optional[str] = typer.Option(
        None, help="Indentation string, compact if empty"
    ),
    tmp_dir: typing.Optional[str] = typer.Option(
        None, help="Directory for the temporary file"
    ),
    strict: typing.Optional[bool] = typer.Option(
        None, "--strict/--lenient", help="Fail on bad items"
    ),
):
    """Generates feed from catalog file."""

    logging.basicConfig(level=logging.INFO)

    settings = load_settings(
        output_file=output,
        encoding=encoding,
        indent_string=indent,
        tmp_dir=tmp_dir,
        strict=strict,
    )

    try:
        catalog = load_catalog(catalog_file)
        generator = Generator(settings)
        generator.generate(
            catalog.shop_info,
            catalog.currencies,
            catalog.categories,
            catalog.offers,
        )
    except (CatalogError, GenerationError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1)


@app.command("inspect")
def inspect(catalog_file: str = typer.Argument(..., help="JSON catalog file")):
    """Shows what is in catalog file."""

    try:
        catalog = load_catalog(catalog_file)
    except CatalogError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Shop: {catalog.shop_info.name or '-'}")
    typer.echo(f"Currencies: {len(catalog.currencies)}")
    typer.echo(f"Categories: {len(catalog.categories)}")
    typer.echo(f"Offers: {len(catalog.offers)}")
