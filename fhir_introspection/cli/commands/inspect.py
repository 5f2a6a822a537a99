"""Inspect command - build the mapping index for model modules and list it."""

from pathlib import Path

import click
from rich.console import Console

from ...domain.entities.model_construct import FhirModelConstruct
from ...infrastructure.io.index_export import write_index_csv
from ..helpers import build_inspector
from ..presenters.mapping_table import render_mapping_table

console = Console()


@click.command()
@click.argument("modules", nargs=-1)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a fhir_introspection.toml config file (default: ./fhir_introspection.toml)",
)
@click.option(
    "--kind",
    type=click.Choice([construct.value for construct in FhirModelConstruct]),
    help="Only list mappings of this construct kind",
)
@click.option(
    "--csv",
    "csv_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the mapping index to this CSV file",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v, -vv)")
def inspect_command(
    modules: tuple[str, ...],
    config_file: Path | None,
    kind: str | None,
    csv_path: Path | None,
    verbose: int,
) -> None:
    inspector, logger = build_inspector(modules, config_file, verbose, console)
    summaries = inspector.summaries()
    if kind is not None:
        summaries = [s for s in summaries if s.construct.value == kind]
    console.print(render_mapping_table(summaries))
    if csv_path is not None:
        write_index_csv(summaries, csv_path)
        logger.success(f"Wrote {len(summaries)} mappings to {csv_path}")
    logger.log_final_stats()
