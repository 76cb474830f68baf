"""Run ``composer outdated`` and turn its output into an OutdatedReport.

The run is classified purely by composer's exit status (with ``--strict``,
non-zero means an update exists), independently of what the report lists.
"""

from __future__ import annotations

import logging

from .errors import EncodingError, ProcessError
from .models import InvocationOptions, OutdatedReport, OverallOutcome
from .shell import composer

logger = logging.getLogger(__name__)

COMPOSER_OUTDATED_ARGS = (
    "outdated",
    "-f",
    "json",
    "--no-plugins",
    "--strict",
    "--locked",
    "-m",
)


def build_arguments(options: InvocationOptions) -> list[str]:
    """Build the composer argument list for the given options.

    Each ignored package adds one ``--ignore <name>`` pair, in the order
    supplied and without deduplication.

    Example:
        build_arguments(InvocationOptions(ignored_packages=["a/b"]))
        → ["outdated", "-f", "json", ..., "-m", "--ignore", "a/b"]
    """
    args = list(COMPOSER_OUTDATED_ARGS)
    for package_name in options.ignored_packages:
        args.extend(["--ignore", package_name])
    return args


def _log_stream(level: int, label: str, data: bytes) -> None:
    """Log a captured stream, skipping it if it is not valid UTF-8."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return
    logger.log(level, "%s:\n%s", label, text)


def run(
    options: InvocationOptions | None = None,
) -> tuple[OverallOutcome, OutdatedReport]:
    """Run composer outdated and decode its report.

    Args:
        options: Packages to ignore. Defaults to ignoring nothing.

    Returns:
        Tuple of (outcome from the exit status, decoded report).

    Raises:
        ProcessError: If composer could not be launched.
        EncodingError: If stdout is not valid UTF-8.
        DecodeError: If stdout is not a report in the expected shape.
    """
    if options is None:
        options = InvocationOptions()

    try:
        result = composer(*build_arguments(options))
    except OSError as exc:
        raise ProcessError(f"I/O Error: {exc}") from exc

    if result.returncode != 0:
        logger.warning(
            "composer outdated did not return with a successful exit code: %s",
            result.returncode,
        )
        _log_stream(logging.DEBUG, "stdout", result.stdout)
        if result.stderr:
            _log_stream(logging.WARNING, "stderr", result.stderr)

    outcome = (
        OverallOutcome.UP_TO_DATE
        if result.returncode == 0
        else OverallOutcome.UPDATE_REQUIRED
    )

    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"Error interpreting program output as UTF-8: {exc}"
        ) from exc

    return outcome, OutdatedReport.from_json(text)
