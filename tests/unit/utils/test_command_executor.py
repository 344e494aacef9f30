import os
import sys

import pytest
from devcontainer_cli.utils.cli.command_executor import CommandExecutor, CommandResult
from devcontainer_cli.utils.cli.exceptions import CliIOError


def test_run_captures_bytes_and_exit_code(stub_cli):
    stub = stub_cli(stdout=b"out\xff", stderr=b"err", exit_code=3)

    result = CommandExecutor().run([str(stub.path), "read-configuration"])

    assert result == CommandResult(stdout=b"out\xff", returncode=3, stderr=b"err")
    assert stub.calls == [["read-configuration"]]


def test_run_uses_given_environment(tmp_path):
    env = dict(os.environ, DEVCONTAINER_TEST_MARKER="marker-42")
    command = [sys.executable, "-c", "import os; print(os.environ['DEVCONTAINER_TEST_MARKER'])"]

    result = CommandExecutor(env=env).run(command)

    assert result.stdout.strip() == b"marker-42"
    assert result.returncode == 0


def test_missing_executable_is_wrapped(tmp_path):
    command = [str(tmp_path / "devcontainer"), "read-configuration"]

    with pytest.raises(CliIOError) as exc_info:
        CommandExecutor().run(command)

    assert isinstance(exc_info.value.error, FileNotFoundError)
    assert exc_info.value.command == command
    assert "Command: " in str(exc_info.value)


def test_non_executable_file_is_wrapped(tmp_path):
    if sys.platform == "win32":
        pytest.skip("POSIX permissions")
    script = tmp_path / "devcontainer"
    script.write_text("#!/bin/sh\necho hi\n")
    os.chmod(script, 0o644)

    with pytest.raises(CliIOError) as exc_info:
        CommandExecutor().run([str(script), "read-configuration"])

    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_empty_environment_is_not_replaced(monkeypatch):
    monkeypatch.setenv("DEVCONTAINER_TEST_MARKER", "inherited")
    assert CommandExecutor(env={}).env == {}
    assert CommandExecutor().env["DEVCONTAINER_TEST_MARKER"] == "inherited"

    command = [sys.executable, "-c", "import os; print(os.environ.get('DEVCONTAINER_TEST_MARKER', 'missing'))"]
    result = CommandExecutor(env={"DEVCONTAINER_ONLY": "1"}).run(command)

    assert result.stdout.strip() == b"missing"
