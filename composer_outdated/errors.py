"""Exceptions raised by composer-outdated.

Every failure of a call is terminal: nothing is retried and no partial
report is returned. The original exception is always chained as
``__cause__``.
"""

from __future__ import annotations


class ComposerOutdatedError(Exception):
    """Base class for all composer-outdated errors."""


class ProcessError(ComposerOutdatedError):
    """composer could not be launched (missing or not executable)."""


class EncodingError(ComposerOutdatedError):
    """composer wrote something to stdout that is not valid UTF-8."""


class DecodeError(ComposerOutdatedError):
    """stdout was not JSON, or did not match the expected report shape."""


class ConfigError(ComposerOutdatedError):
    """The configuration file could not be read or is malformed."""
