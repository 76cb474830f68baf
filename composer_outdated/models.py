"""Data models for composer-outdated.

These Pydantic models mirror the JSON that ``composer outdated -f json
--locked`` prints, plus the options used to invoke it. All of them are
immutable values built once per call.
"""

from __future__ import annotations

import enum
import functools

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError


@functools.total_ordering
class UpdateClassification(enum.Enum):
    """What kind of update, if any, composer reports for a package.

    Members are ordered ``UP_TO_DATE < SEMVER_SAFE_UPDATE < UPDATE_POSSIBLE``
    so ``max()`` over a report gives its worst status. The ordering follows
    declaration order, not the string values.
    """

    UP_TO_DATE = "up-to-date"
    SEMVER_SAFE_UPDATE = "semver-safe-update"
    UPDATE_POSSIBLE = "update-possible"

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UpdateClassification):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


class OverallOutcome(enum.Enum):
    """What composer's exit status said about the run as a whole."""

    UP_TO_DATE = "up-to-date"
    UPDATE_REQUIRED = "update-required"

    def __str__(self) -> str:
        return self.value


class InvocationOptions(BaseModel):
    """Caller-supplied options for a composer outdated run.

    Attributes:
        ignored_packages: Package names to exclude from the check. Each one
            becomes its own ``--ignore`` argument, in order; duplicates are
            passed through as-is.
    """

    model_config = ConfigDict(frozen=True)

    ignored_packages: tuple[str, ...] = ()


class PackageStatus(BaseModel):
    """One row of composer's report.

    ``update_classification`` is taken from composer's ``latest-status`` and
    is never recomputed from ``version``/``latest``.

    Attributes:
        name: Package name, e.g. "symfony/console".
        version: Version currently locked.
        latest: Latest version available.
        update_classification: Whether an update exists and whether it is
            semver-compatible.
        description: Package description, may be empty.
        warning: Extra notes such as an abandonment notice. None when
            composer did not send one.
    """

    model_config = ConfigDict(
        frozen=True, validate_by_name=True, validate_by_alias=True
    )

    name: str = Field(min_length=1)
    version: str
    latest: str
    update_classification: UpdateClassification = Field(alias="latest-status")
    description: str
    warning: str | None = None


class OutdatedReport(BaseModel):
    """Top-level structure of composer's report.

    Since composer is called with ``--locked``, every package ends up in
    ``locked``, in the order composer printed them.
    """

    model_config = ConfigDict(frozen=True)

    locked: tuple[PackageStatus, ...]

    @classmethod
    def from_json(cls, text: str) -> OutdatedReport:
        """Decode composer's JSON output.

        Only wire keys are accepted: a row carrying ``update_classification``
        instead of ``latest-status`` is missing a required field.

        Raises:
            DecodeError: If the text is not JSON or does not match the
                schema (missing field, wrong type, unknown ``latest-status``).
        """
        try:
            return cls.model_validate_json(text, by_alias=True, by_name=False)
        except ValidationError as exc:
            raise DecodeError(f"Error parsing JSON: {exc}") from exc

    def to_json(self) -> str:
        """Encode back to composer's wire format (``latest-status`` keys)."""
        return self.model_dump_json(by_alias=True)

    def worst_classification(self) -> UpdateClassification:
        """Most severe classification in the report, up-to-date if empty."""
        return max(
            (pkg.update_classification for pkg in self.locked),
            default=UpdateClassification.UP_TO_DATE,
        )

    def requiring_update(self) -> list[PackageStatus]:
        """Packages with any update available, in report order."""
        return [
            pkg
            for pkg in self.locked
            if pkg.update_classification is not UpdateClassification.UP_TO_DATE
        ]
