"""CLI entry point for openapi-dsl."""

import logging
from pathlib import Path

import click

from openapi_dsl.documents import DEFAULT_FORMAT, FORMATS, render
from openapi_dsl.exceptions import OpenApiDslError
from openapi_dsl.loader import load_document


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """openapi-dsl — build OpenAPI documents from Python helper calls."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("target")
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file path (stdout when omitted).")
@click.option("--format", "fmt", default=DEFAULT_FORMAT, type=click.Choice(FORMATS), help="Output format.")
def build(target: str, output: Path | None, fmt: str):
    """Render the document built by TARGET (module:attribute or file.py:attribute)."""
    try:
        doc = load_document(target)
        text = render(doc, fmt)
    except OpenApiDslError as e:
        raise click.ClickException(e.message) from e

    if output is None:
        click.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    click.echo(f"Wrote {len(doc.get('paths', {}))} paths to {output}", err=True)
