import pytest
from devcontainer_cli.utils.cli.exceptions import (
    CliIOError,
    DevcontainerCliError,
    ErrorKind,
    InvalidPathError,
    OutputDecodeError,
)


def _decode_error() -> UnicodeDecodeError:
    try:
        b"\xc3\x28".decode("utf-8")
    except UnicodeDecodeError as e:
        return e
    raise AssertionError("expected a decode error")


@pytest.mark.parametrize(
    "error,kind,prefix",
    [
        (InvalidPathError("/tmp/missing"), ErrorKind.INVALID_PATH, "Invalid path: "),
        (CliIOError(FileNotFoundError(2, "No such file")), ErrorKind.IO, "IO error: "),
        (OutputDecodeError(_decode_error()), ErrorKind.UTF8, "UTF8 error: "),
    ],
)
def test_error_kinds(error, kind, prefix):
    assert isinstance(error, DevcontainerCliError)
    assert error.kind is kind
    assert str(error).startswith(prefix)


def test_error_kinds_are_closed():
    assert {k.value for k in ErrorKind} == {"invalid_path", "io", "utf8"}
    assert {cls.kind for cls in DevcontainerCliError.__subclasses__()} == set(ErrorKind)


def test_invalid_path_keeps_path():
    error = InvalidPathError("/workspaces/missing")
    assert error.path == "/workspaces/missing"
    assert str(error) == "Invalid path: /workspaces/missing"


def test_command_is_appended_to_message():
    error = CliIOError(PermissionError(13, "Permission denied"), command=["devcontainer", "read-configuration"])
    assert str(error).endswith("\nCommand: devcontainer read-configuration")
    assert isinstance(error.error, PermissionError)
