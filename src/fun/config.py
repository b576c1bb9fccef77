"""Configuration utilities for the :mod:`fun` example tooling."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class InvokeConfig:
    """Defaults forwarded to :func:`fun.invoker.invoke` and :func:`fun.composition.compose`."""

    check_arity: bool = True


@dataclass
class FunConfig:
    """Top-level configuration object composed of sub-configurations."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    invoke: InvokeConfig = field(default_factory=InvokeConfig)


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config(path: Optional[Path] = None) -> FunConfig:
    """Load :class:`FunConfig` from ``path``; missing keys take their defaults."""

    if path is None:
        return FunConfig()

    raw = load_yaml(Path(path))
    logging_cfg = raw.get("logging") or {}
    invoke_cfg = raw.get("invoke") or {}

    return FunConfig(
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
        invoke=InvokeConfig(check_arity=bool(invoke_cfg.get("check_arity", True))),
    )


__all__ = ["LoggingConfig", "InvokeConfig", "FunConfig", "load_yaml", "load_config"]
