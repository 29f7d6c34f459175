import errno
import os
import subprocess

import pytest

from pipex.cli import (
    ARGUMENT_ERROR,
    FAILURE_STATUS,
    USAGE,
    ExecutionError,
    main,
    run_command,
    run_pipeline,
)

NOT_FOUND = f"Execution Error: {os.strerror(errno.ENOENT)}"


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("hello world\nsecond line\n")
    return path


def test_run_command_captures_output():
    process = run_command("echo hello world", os.environ, None, subprocess.PIPE)
    out, _ = process.communicate()
    assert out == b"hello world\n"
    assert process.returncode == 0


def test_run_command_ignores_repeated_spaces():
    process = run_command("echo   a    b", os.environ, None, subprocess.PIPE)
    out, _ = process.communicate()
    assert out == b"a b\n"


def test_run_command_empty_raises():
    with pytest.raises(ExecutionError) as info:
        run_command("   ", os.environ)
    assert str(info.value) == NOT_FOUND


def test_run_command_unknown_raises():
    with pytest.raises(ExecutionError) as info:
        run_command("no-such-command-xyz", os.environ)
    assert info.value.reason == os.strerror(errno.ENOENT)


def test_pipeline_passes_data_through(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "cat", str(outfile), os.environ)
    assert status == 0
    assert outfile.read_text() == infile.read_text()


def test_pipeline_applies_commands(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    run_pipeline(str(infile), "grep second", "cat", str(outfile), os.environ)
    assert outfile.read_text() == "second line\n"


def test_pipeline_truncates_existing_output(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    outfile.write_text("x" * 500)
    run_pipeline(str(infile), "cat", "cat", str(outfile), os.environ)
    assert outfile.read_text() == infile.read_text()


def test_pipeline_returns_second_status(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(str(infile), "cat", "false", str(outfile), os.environ)
    assert status == 1


def test_missing_infile_reported_and_second_runs(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(
        str(tmp_path / "missing.txt"), "cat", "cat", str(outfile), os.environ
    )
    assert status == 0
    assert outfile.exists()
    assert outfile.read_text() == ""
    assert NOT_FOUND in capsys.readouterr().err


def test_unknown_first_command_reported(infile, tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = run_pipeline(
        str(infile), "no-such-command-xyz", "cat", str(outfile), os.environ
    )
    assert status == 0
    assert outfile.read_text() == ""
    assert NOT_FOUND in capsys.readouterr().err


def test_unknown_second_command_raises(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    with pytest.raises(ExecutionError) as info:
        run_pipeline(str(infile), "cat", "no-such-command-xyz", str(outfile), os.environ)
    assert str(info.value) == NOT_FOUND


def test_unwritable_outfile_raises(infile, tmp_path):
    outfile = tmp_path / "no-dir" / "out.txt"
    with pytest.raises(ExecutionError) as info:
        run_pipeline(str(infile), "cat", "cat", str(outfile), os.environ)
    assert info.value.reason == os.strerror(errno.ENOENT)


def test_main_wrong_argument_count(capsys):
    assert main(["only", "three", "args"]) == 0
    captured = capsys.readouterr()
    assert captured.err == ARGUMENT_ERROR
    assert captured.out == USAGE


def test_main_usage_text(capsys):
    main([])
    assert capsys.readouterr().out == "Usage: ./pipex infile cmd1 cmd2 outfile\n"


def test_main_runs_pipeline(infile, tmp_path):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_main_second_failure_exit_status(infile, tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    status = main([str(infile), "cat", "no-such-command-xyz", str(outfile)])
    assert status == FAILURE_STATUS
    assert NOT_FOUND in capsys.readouterr().err