from pathlib import Path

import click
from rich.console import Console

from ...application.models import MappingSummary
from ..helpers import build_inspector, resolve_mapping
from ..presenters.mapping_table import render_element_table

console = Console()


@click.command()
@click.argument("modules", nargs=-1)
@click.option("--type", "type_name", required=True, help="Wire-format name of the type")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a fhir_introspection.toml config file",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
def elements_command(
    modules: tuple[str, ...],
    type_name: str,
    config_file: Path | None,
    verbose: int,
) -> None:
    inspector, _ = build_inspector(modules, config_file, verbose, console)
    mapping = resolve_mapping(inspector, type_name)
    if not mapping.elements:
        console.print(f"{mapping.name} has no mapped elements")
        return
    console.print(render_element_table(MappingSummary.from_mapping(mapping)))
