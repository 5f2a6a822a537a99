from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.services.mapping.class_mapping import ClassMapping


class NullLogger(LoggerPort):
    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_import_start(self, source: str, candidate_count: int) -> None:
        return None

    @override
    def log_mapping_registered(self, mapping: ClassMapping) -> None:
        return None

    @override
    def log_import_complete(
        self, source: str, mapped_count: int, skipped_count: int
    ) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
