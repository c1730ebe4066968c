from dataclasses import dataclass

from shellout.errors import ValidationError
from shellout.quoting import has_unsafe_content


@dataclass(frozen=True)
class SafeString:
    """
    A string that needs no quoting when placed on a shell command line.

    Build one with `SafeString.validate` for anything that did not come from
    a literal in your own code. `SafeString.trusted` skips the check and is
    meant for fixed program names and flags such as ``"git"``.
    """

    value: str

    @classmethod
    def validate(cls, value: str) -> "SafeString":
        if has_unsafe_content(value):
            raise ValidationError(value)
        return cls(value)

    @classmethod
    def trusted(cls, value: str) -> "SafeString":
        return cls(value)

    @classmethod
    def coerce(cls, value: "str | SafeString") -> "SafeString":
        if isinstance(value, SafeString):
            return value
        return cls.validate(value)

    def __str__(self) -> str:
        return self.value
