from typing import NamedTuple


class CommandOutput(NamedTuple):
    stdout: str
    stderr: str


def decode_output(data: bytes) -> str:
    """
    Decode captured process output as UTF-8 and drop one trailing newline.

    Invalid byte sequences are replaced rather than raised. Only a single
    ``\\n`` is removed: ``"a\\n\\n"`` becomes ``"a\\n"`` and ``"a\\r\\n"``
    becomes ``"a\\r"``.
    """
    output = data.decode("utf-8", errors="replace")
    if output.endswith("\n"):
        return output[:-1]
    return output
