from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Conventions, LogLevels

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class IntrospectionConfig:
    model_modules: tuple[str, ...] = ()
    verbosity: int = LogLevels.NORMAL
    include_private: bool = False
    strict_name_collisions: bool = True

    def __post_init__(self) -> None:
        if not LogLevels.NORMAL <= self.verbosity <= LogLevels.DEBUG:
            raise ValueError(
                f"verbosity must be between {LogLevels.NORMAL} and {LogLevels.DEBUG}, got {self.verbosity}"
            )
        for module_name in self.model_modules:
            if not module_name or not module_name.strip():
                raise ValueError("model_modules must not contain empty module names")

    @classmethod
    def from_env(cls) -> IntrospectionConfig:
        raw_modules = os.getenv("FHIR_MODEL_MODULES", "")
        return cls(
            model_modules=_split_modules(raw_modules),
            verbosity=int(os.getenv("FHIR_VERBOSITY", str(LogLevels.NORMAL))),
            include_private=_env_flag("FHIR_INCLUDE_PRIVATE", default=False),
            strict_name_collisions=_env_flag(
                "FHIR_STRICT_NAME_COLLISIONS", default=True
            ),
        )


class ConfigLoader:
    @staticmethod
    def load(config_file: Path | None = None) -> IntrospectionConfig:
        config = IntrospectionConfig.from_env()
        if config_file is None:
            config_file = Path(Conventions.CONFIG_FILE_NAME)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: IntrospectionConfig
    ) -> IntrospectionConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        inspector = _get_table(data, "inspector")
        logging_section = _get_table(data, "logging")
        model_modules = base_config.model_modules
        if (value := inspector.get("modules")) is not None:
            model_modules = _coerce_modules(value, key="inspector.modules")
        include_private = base_config.include_private
        if (value := inspector.get("include_private")) is not None:
            include_private = _coerce_bool(value, key="inspector.include_private")
        strict_name_collisions = base_config.strict_name_collisions
        if (value := inspector.get("strict_name_collisions")) is not None:
            strict_name_collisions = _coerce_bool(
                value, key="inspector.strict_name_collisions"
            )
        verbosity = base_config.verbosity
        if (value := logging_section.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="logging.verbosity")
        return IntrospectionConfig(
            model_modules=model_modules,
            verbosity=verbosity,
            include_private=include_private,
            strict_name_collisions=strict_name_collisions,
        )


def _split_modules(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_modules(value: object, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        return _split_modules(value)
    if isinstance(value, list):
        return tuple(str(item).strip() for item in value if str(item).strip())
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    raise ValueError(f"{key} must be a bool or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
