"""Run ``infile cmd1 cmd2 outfile`` as the shell pipeline ``< infile cmd1 | cmd2 > outfile``."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import IO, Any

from pipex.paths import find_command_path
from pipex.textutil import split

FAILURE_STATUS = 255
USAGE = "Usage: ./pipex infile cmd1 cmd2 outfile\n"
ARGUMENT_ERROR = "Error: Incorrect number of arguments\n"


class ExecutionError(Exception):
    """A file could not be opened or a command could not be started."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Execution Error: {reason}")
        self.reason = reason


def _not_found() -> ExecutionError:
    return ExecutionError(os.strerror(errno.ENOENT))


def _from_os_error(exc: OSError) -> ExecutionError:
    return ExecutionError(exc.strerror or str(exc))


def run_command(
    command: str,
    env: Mapping[str, str] | None = None,
    stdin: IO[Any] | int | None = None,
    stdout: IO[Any] | int | None = None,
) -> subprocess.Popen:
    """Start ``command`` (split on spaces) found through ``PATH``; return the process.

    Raises ``ExecutionError`` when the command is empty, cannot be found or
    cannot be started.
    """
    environment = os.environ if env is None else env
    words = split(command, " ")
    if not words:
        raise _not_found()
    executable = find_command_path(words[0], environment)
    if executable is None:
        raise _not_found()
    try:
        return subprocess.Popen(
            words,
            executable=executable,
            env=dict(environment),
            stdin=stdin,
            stdout=stdout,
        )
    except OSError as exc:
        raise _from_os_error(exc) from exc


def _report(error: ExecutionError) -> None:
    print(error, file=sys.stderr)


def _start_producer(
    infile: str, command: str, env: Mapping[str, str]
) -> subprocess.Popen:
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise _from_os_error(exc) from exc
    with source:
        return run_command(command, env, source, subprocess.PIPE)


def _open_output(outfile: str) -> IO[bytes]:
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o777)
    except OSError as exc:
        raise _from_os_error(exc) from exc
    return os.fdopen(fd, "wb")


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``first`` into ``second``, writing ``outfile``.

    A failure of the first stage is reported on standard error and the second
    stage then reads empty input. A failure of the second stage raises
    ``ExecutionError``. Returns the exit status of the second command.
    """
    environment = os.environ if env is None else env
    producer: subprocess.Popen | None = None
    try:
        producer = _start_producer(infile, first, environment)
    except ExecutionError as exc:
        _report(exc)

    upstream: Any = producer.stdout if producer is not None else subprocess.DEVNULL
    try:
        with _open_output(outfile) as sink:
            consumer = run_command(second, environment, upstream, sink)
        if producer is not None and producer.stdout is not None:
            producer.stdout.close()
        return consumer.wait()
    finally:
        if producer is not None:
            if producer.stdout is not None:
                producer.stdout.close()
            producer.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(ARGUMENT_ERROR)
        sys.stdout.write(USAGE)
        return 0
    infile, first, second, outfile = args
    try:
        return run_pipeline(infile, first, second, outfile)
    except ExecutionError as exc:
        _report(exc)
        return FAILURE_STATUS


if __name__ == "__main__":
    sys.exit(main())