"""seavan CLI: name, hash and wrap single files into container images.

Commands:
- name   print the content-addressed reference without building
- digest print the SHA-256 of a file
- wrap   build the image (optionally writing an image-ref.json receipt)
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from seavan.errors import SeavanError
from seavan.layer import WrappedLayer
from seavan.package.docker import ImageBuilder
from seavan.types import ImageRef
from seavan.validator import write_image_ref

app = typer.Typer(add_completion=False, help="Wrap single files in container layers")
console = Console()


def _fail(exc: Exception) -> NoReturn:
    rprint(f"[red]Error:[/red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def _layer(path: str, tag: str | None, registry: str | None) -> WrappedLayer:
    layer = WrappedLayer.from_path(path, tag=tag)
    if registry:
        layer = layer.with_registry(registry)
    return layer


@app.command()
def name(
    path: str = typer.Argument(..., help="File to wrap"),
    tag: str | None = typer.Option(None, "--tag", help="Image tag (sanitized)"),
    registry: str | None = typer.Option(None, "--registry", help="Registry host/prefix"),
) -> None:
    try:
        print(_layer(path, tag, registry).repository_name_and_tag())
    except (SeavanError, OSError) as exc:
        _fail(exc)


@app.command()
def digest(path: str = typer.Argument(..., help="File to hash")) -> None:
    try:
        print(WrappedLayer.from_path(path).hash())
    except (SeavanError, OSError) as exc:
        _fail(exc)


@app.command()
def wrap(
    path: str = typer.Argument(..., help="File to wrap"),
    tag: str | None = typer.Option(None, "--tag", help="Image tag (sanitized)"),
    registry: str | None = typer.Option(None, "--registry", help="Registry host/prefix"),
    engine: str | None = typer.Option(
        None, "--engine", help="Build engine executable (default: $SEAVAN_ENGINE or docker)"
    ),
    out: str | None = typer.Option(None, "--out", help="Write image-ref.json into this directory"),
) -> None:
    try:
        layer = _layer(path, tag, registry)
        builder = ImageBuilder(engine=engine)
        reference = builder.build(layer).unwrap()
        ref_file = None
        if out:
            ref = ImageRef.for_layer(layer, reference, engine=builder.engine)
            ref_file = write_image_ref(Path(out), ref)
    except (SeavanError, OSError) as exc:
        _fail(exc)

    table = Table(title="Wrapped Image")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("source", str(layer.path))
    table.add_row("reference", reference)
    if ref_file:
        table.add_row("receipt", str(ref_file))
    console.print(table)
    print(reference)


if __name__ == "__main__":
    app()
