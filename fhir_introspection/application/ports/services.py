from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.services.mapping.class_mapping import ClassMapping


@runtime_checkable
class LoggerPort(Protocol):
    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_import_start(self, source: str, candidate_count: int) -> None: ...

    def log_mapping_registered(self, mapping: "ClassMapping") -> None: ...

    def log_import_complete(
        self, source: str, mapped_count: int, skipped_count: int
    ) -> None: ...

    def log_final_stats(self) -> None: ...
