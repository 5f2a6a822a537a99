from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.services.mapping.class_mapping import ClassMapping


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    source: str = ""
    type_name: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


def _empty_stats() -> dict[str, int]:
    return {
        "sources_imported": 0,
        "types_mapped": 0,
        "types_skipped": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_import_start(self, source: str, candidate_count: int) -> None:
        self.set_context(source=source, operation="import")
        self._stats["sources_imported"] += 1
        self.verbose(f"Importing {candidate_count} candidate types from {source}")

    @override
    def log_mapping_registered(self, mapping: ClassMapping) -> None:
        self._stats["types_mapped"] += 1
        self.set_context(type_name=mapping.implementing_type.__qualname__)
        detail = f"{mapping.model_construct.value} {mapping.name}"
        if mapping.profile:
            detail += f" (profile {mapping.profile})"
        if mapping.elements:
            detail += f", {len(mapping.elements)} elements"
        self.debug(f"  Mapped {mapping.implementing_type.__qualname__} → {detail}")

    @override
    def log_import_complete(
        self, source: str, mapped_count: int, skipped_count: int
    ) -> None:
        self._stats["types_skipped"] += skipped_count
        msg = f"Imported {mapped_count} mappings from {source}"
        if skipped_count and self.verbosity >= LogLevel.DEBUG:
            msg += f" ({skipped_count} types skipped)"
        self.verbose(msg)
        self.clear_context()

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Introspection Statistics:[/dim]")
            self.console.print(
                f"[dim]  Sources imported: {self._stats['sources_imported']}[/dim]"
            )
            self.console.print(
                f"[dim]  Types mapped: {self._stats['types_mapped']}[/dim]"
            )
            self.console.print(
                f"[dim]  Types skipped: {self._stats['types_skipped']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _empty_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.source:
            parts.append(self._context.source)
        if self._context.type_name:
            parts.append(self._context.type_name)
        return f"[{':'.join(parts)}] " if parts else ""
