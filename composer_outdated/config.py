"""Configuration file loading.

Uses tomlkit to read the optional ``.composer-outdated.toml`` file, which
lists packages to leave out of the check:

    [outdated]
    ignore = ["acme/widget", "acme/legacy"]
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .errors import ConfigError
from .models import InvocationOptions

CONFIG_FILENAME = ".composer-outdated.toml"


def find_config(root: Path) -> Path | None:
    """Return the default config file under root, or None if there is none."""
    path = root / CONFIG_FILENAME
    return path if path.is_file() else None


def load_config(path: Path) -> InvocationOptions:
    """Load invocation options from a TOML config file.

    A missing ``[outdated]`` table or ``ignore`` key means nothing is ignored.
    tomlkit tables and arrays subclass dict and list, so plain isinstance
    checks work on them.

    Raises:
        ConfigError: If the file cannot be read or parsed, or ``ignore`` is
            not an array of strings.
    """
    try:
        doc = tomlkit.parse(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except TOMLKitError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    section = doc.get("outdated", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[outdated] in {path} must be a table")

    ignore = section.get("ignore", [])
    if not isinstance(ignore, list) or not all(isinstance(i, str) for i in ignore):
        raise ConfigError(f"outdated.ignore in {path} must be an array of strings")

    return InvocationOptions(ignored_packages=tuple(str(i) for i in ignore))


def merge_ignores(
    options: InvocationOptions, extra: Iterable[str]
) -> InvocationOptions:
    """Append extra ignored packages after the ones already in options.

    Order is kept and nothing is deduplicated.
    """
    return InvocationOptions(ignored_packages=(*options.ignored_packages, *extra))
