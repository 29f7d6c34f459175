"""Locate executables through the directories listed in ``PATH``."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipex.textutil import split


def find_command_path(command: str, env: Mapping[str, str] | None = None) -> str | None:
    """Return the first ``<dir>/<command>`` in ``PATH`` that exists and is executable.

    Empty entries of ``PATH`` are skipped. Returns ``None`` when no directory
    holds such a file or when the environment has no ``PATH`` at all.
    """
    environment = os.environ if env is None else env
    search_path = environment.get("PATH")
    if search_path is None:
        return None
    for directory in split(search_path, ":"):
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None