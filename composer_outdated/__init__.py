"""Run ``composer outdated`` and decode its JSON output into typed models."""

from __future__ import annotations

from .errors import (
    ComposerOutdatedError,
    ConfigError,
    DecodeError,
    EncodingError,
    ProcessError,
)
from .invoker import build_arguments, run
from .models import (
    InvocationOptions,
    OutdatedReport,
    OverallOutcome,
    PackageStatus,
    UpdateClassification,
)

outdated = run

__all__ = [
    "ComposerOutdatedError",
    "ConfigError",
    "DecodeError",
    "EncodingError",
    "InvocationOptions",
    "OutdatedReport",
    "OverallOutcome",
    "PackageStatus",
    "ProcessError",
    "UpdateClassification",
    "build_arguments",
    "outdated",
    "run",
]
