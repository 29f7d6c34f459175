# pipex

`pipex` runs two commands joined by a pipe. The first command reads its
input from a file. The second command's output goes to another file. It
behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

This installs the `pipex` command. You can also run the module directly
with `python -m pipex.cli`.

## Usage

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

For example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

How it behaves:

- Each command is split on spaces. Empty words are dropped. There is no
  quoting and no escaping.
- The program name is looked up in each non-empty directory listed in
  `PATH`, in order. The first file that exists and is executable is used.
  A name that contains a slash is looked up the same way and is not run
  directly.
- The output file is opened for writing, created if it is missing
  (mode `0777`, subject to your umask) and truncated.
- The exit status is the exit status of the second command.

Errors:

- If there are not exactly four arguments, `pipex` writes
  `Error: Incorrect number of arguments` to standard error and a usage line
  to standard output, and exits with status 0.
- If the input file cannot be opened, or the first command cannot be found
  or started, an `Execution Error: ...` line goes to standard error. The
  second command still runs, with empty input.
- If the output file cannot be opened, or the second command cannot be
  found or started, an `Execution Error: ...` line goes to standard error
  and `pipex` exits with status 255.

## Library use

The pipeline can also be run from Python:

```python
import os
from pipex.cli import ExecutionError, run_pipeline

try:
    status = run_pipeline("input.txt", "grep error", "wc -l", "count.txt", os.environ)
except ExecutionError as exc:
    print(exc.reason)
```

- `pipex.cli.run_pipeline(infile, first, second, outfile, env=None)` runs
  the pipeline and returns the second command's exit status. `env` defaults
  to `os.environ`. It raises `ExecutionError` when the second stage cannot
  be set up. A failing first stage is only reported on standard error.
- `pipex.cli.run_command(command, env=None, stdin=None, stdout=None)` starts
  one command with the given streams and returns the `subprocess.Popen`
  object. It raises `ExecutionError` when the command is empty, not found or
  cannot be started.
- `pipex.cli.main(argv=None)` is the command-line entry point. It returns
  the exit status.
- `pipex.paths.find_command_path(command, env=None)` returns
  `"<dir>/<command>"` for the first matching `PATH` directory, or `None`.

The package also has some small helpers:

- `pipex.textutil`: `split`, `atoi`, `atol`, `itoa`, `strtrim`, `substr`,
  `strnstr` and `strncmp`. They follow C-library rules. For example, `atoi`
  parses a leading integer after whitespace and an optional sign, and wraps
  the result to 32 bits. `atol` wraps to 64 bits. `strnstr` returns an index
  or `None`.
- `pipex.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args)`. They
  support `%c %s %p %d %i %u %x %X` and `%%`. Unknown conversions are
  dropped. `%s` of `None` gives `(null)`. `%p` of zero or `None` gives
  `(nil)`. `printf` writes to standard output and returns the number of
  characters written.
- `pipex.linereader.LineReader(stream, buffer_size=42)` reads a text or
  binary stream in fixed-size chunks. It returns one line at a time, with
  the newline kept. You can call `next_line()`, which returns `None` at the
  end of the stream, or iterate over the reader.

## Limitations

- Only two commands are supported. There is no here-document mode and no
  append mode for the output file.
- Commands are not passed through a shell. There are no quotes, globs,
  variables or redirections inside a command string.

## Tests

```sh
pip install ".[test]"
pytest
```