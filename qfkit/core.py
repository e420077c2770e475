"""Library-wide constants and the error type raised on failed checks."""

import math

VERSION_STRING = "0.5.0"
VERSION_MAJOR = 0
VERSION_MINOR = 5
VERSION_REVISION = 0

DAYS_PER_YEAR = 365.25
SECS_PER_DAY = 86400.0
SECS_PER_DAY_LONG = 86400
SECS_PER_YEAR = SECS_PER_DAY * DAYS_PER_YEAR
SECS_PER_HOUR = 3600.0

M_1_SQRT2PI = 0.398942280401432678
M_SQRT2 = math.sqrt(2.0)
M_SQRT1_2 = math.sqrt(0.5)

_DEFAULT_MESSAGE = "error: assertion failed"


class QfError(Exception):
    """Error raised by the library; more text can be appended with ``<<``."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __lshift__(self, other: object) -> "QfError":
        self.message += str(other)
        self.args = (self.message,)
        return self


def ensure(condition: object, message: str = "") -> None:
    """Raise QfError with ``message`` unless ``condition`` is true."""
    if not condition:
        raise QfError(message or _DEFAULT_MESSAGE)