from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import click

from ..application.model_inspector import ModelInspector
from ..config import ConfigLoader
from ..exceptions import IntrospectionError
from ..infrastructure.logging import ConsoleLogger, LogLevel
from ..logging_config import create_logger

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

    from ..domain.services.mapping.class_mapping import ClassMapping


def build_inspector(
    modules: tuple[str, ...],
    config_file: Path | None,
    verbose: int,
    console: Console,
) -> tuple[ModelInspector, ConsoleLogger]:
    config = ConfigLoader.load(config_file)
    if modules:
        config = replace(config, model_modules=modules)
    if not config.model_modules:
        raise click.UsageError(
            "No model modules given; pass MODULES or set [inspector] modules in the config file"
        )
    verbosity = max(config.verbosity, min(verbose, LogLevel.DEBUG))
    logger = create_logger(console, verbosity)
    inspector = ModelInspector(config, logger)
    try:
        inspector.import_configured_modules()
    except ModuleNotFoundError as exc:
        raise click.ClickException(f"Cannot import model module: {exc}") from exc
    except IntrospectionError as exc:
        raise click.ClickException(str(exc)) from exc
    return inspector, logger


def resolve_mapping(inspector: ModelInspector, type_name: str) -> ClassMapping:
    mapping = inspector.find_class_mapping_for_resource(
        type_name
    ) or inspector.find_class_mapping_for_data_type(type_name)
    if mapping is None:
        raise click.ClickException(f"No mapping found for '{type_name}'")
    return mapping
