import pickle

from shellout.errors import ShellOutError, SpawnError, ValidationError


def test_description_format():
    error = ShellOutError(
        exit_code=7,
        stdout_bytes=b"Some output",
        stderr_bytes=b"Hey, I'm an error!",
    )
    assert str(error) == (
        "ShellOut encountered an error\n"
        "Status code: 7\n"
        'Message: "Hey, I\'m an error!"\n'
        'Output: "Some output"'
    )


def test_message_and_output_strip_one_trailing_newline():
    error = ShellOutError(
        exit_code=1, stdout_bytes=b"out\n\n", stderr_bytes=b"err\r\n"
    )
    assert error.output == "out\n"
    assert error.message == "err\r"


def test_invalid_utf8_is_replaced():
    error = ShellOutError(exit_code=1, stderr_bytes=b"bad \xff byte\n")
    assert error.message == "bad � byte"


def test_raw_bytes_are_kept():
    error = ShellOutError(exit_code=2, stdout_bytes=b"a\n", stderr_bytes=b"b\n")
    assert error.stdout_bytes == b"a\n"
    assert error.stderr_bytes == b"b\n"


def test_error_survives_pickling():
    error = ShellOutError(exit_code=3, stdout_bytes=b"x", stderr_bytes=b"y")
    restored = pickle.loads(pickle.dumps(error))
    assert restored.exit_code == 3
    assert restored.output == "x"
    assert restored.message == "y"


def test_spawn_error_message_names_command_and_directory():
    reason = FileNotFoundError(2, "No such file or directory")
    error = SpawnError("missing-tool --help", "/tmp/work", reason)
    assert error.reason is reason
    assert str(error) == (
        "Failed to launch 'missing-tool --help' in /tmp/work: No such file or directory"
    )


def test_spawn_error_survives_pickling():
    reason = FileNotFoundError(2, "No such file or directory")
    error = SpawnError("missing-tool", "/tmp/work", reason)
    restored = pickle.loads(pickle.dumps(error))
    assert restored.command == "missing-tool"
    assert restored.working_directory == "/tmp/work"
    assert restored.reason.strerror == "No such file or directory"
    assert str(restored) == str(error)


def test_validation_error_survives_pickling():
    error = ValidationError("two words")
    restored = pickle.loads(pickle.dumps(error))
    assert restored.value == "two words"
    assert str(restored) == str(error)
