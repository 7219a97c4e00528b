"""CLI entry point for swagger-model."""

import importlib
import logging
from functools import reduce
from pathlib import Path

import click

from swagger_model.core.errors import DecodeError
from swagger_model.derive import to_schema
from swagger_model.io import FORMATS, dump_document, read_swagger, write_document

logger = logging.getLogger(__name__)

format_option = click.option(
    "--format",
    "fmt",
    default="json",
    envvar="SWAGGER_MODEL_FORMAT",
    show_envvar=True,
    type=click.Choice(FORMATS),
    help="Output document format.",
)
indent_option = click.option(
    "--indent",
    default=2,
    envvar="SWAGGER_MODEL_INDENT",
    show_envvar=True,
    type=click.IntRange(min=0),
    help="Indentation of the output document.",
)


def _emit(value, output: Path | None, fmt: str, indent: int) -> None:
    if output is None:
        click.echo(dump_document(value, fmt, indent), nl=False)
        return
    write_document(output, value, fmt, indent)
    click.echo(f"Saved to {output}", err=True)


def _import_type(target: str):
    """Resolve ``package.module:Name`` to an object."""
    module_name, sep, attr = target.partition(":")
    if not sep or not attr:
        raise click.BadParameter("expected MODULE:NAME", param_hint="TARGET")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {module_name}: {e}", param_hint="TARGET") from e
    obj = module
    for part in attr.split("."):
        if not hasattr(obj, part):
            raise click.BadParameter(f"{module_name} has no attribute {attr}", param_hint="TARGET")
        obj = getattr(obj, part)
    return obj


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def main(verbose: bool):
    """swagger-model: read, normalize and merge Swagger 2.0 documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file (default: stdout).")
@format_option
@indent_option
def normalize(doc_path: Path, output: Path | None, fmt: str, indent: int):
    """Decode a Swagger document and write it back in canonical form."""
    try:
        swagger = read_swagger(doc_path)
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    logger.info("normalizing %s", doc_path)
    _emit(swagger.to_json(), output, fmt, indent)


@main.command()
@click.argument("doc_paths", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file (default: stdout).")
@format_option
@indent_option
def merge(doc_paths: tuple[Path, ...], output: Path | None, fmt: str, indent: int):
    """Combine several Swagger documents into one.

    Earlier documents win when the same scalar field is set twice.
    """
    try:
        swaggers = [read_swagger(path) for path in doc_paths]
    except DecodeError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Merging {len(swaggers)} documents...", err=True)
    _emit(reduce(lambda left, right: left + right, swaggers).to_json(), output, fmt, indent)


@main.command()
@click.argument("target")
@format_option
@indent_option
def schema(target: str, fmt: str, indent: int):
    """Print the schema derived from a Python type given as MODULE:NAME."""
    tp = _import_type(target)
    try:
        derived = to_schema(tp)
    except TypeError as e:
        raise click.ClickException(str(e)) from e
    _emit(derived.to_json(), None, fmt, indent)
