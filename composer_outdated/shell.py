"""Subprocess wrapper for the composer executable.

Kept separate from the invoker so tests have a single seam to patch.
"""

from __future__ import annotations

import subprocess

COMPOSER = "composer"


def composer(*args: str) -> subprocess.CompletedProcess[bytes]:
    """Run composer and capture its output.

    The executable is resolved through ``PATH``. Output is captured as raw
    bytes so the caller decides how to decode it, and a non-zero exit is not
    an error here (composer uses it to signal available updates).

    Args:
        *args: Arguments to pass to composer (e.g., "outdated", "-f", "json").

    Returns:
        CompletedProcess with returncode, stdout and stderr.

    Raises:
        OSError: If the executable cannot be found or started.
    """
    return subprocess.run([COMPOSER, *args], capture_output=True, check=False)
