"""Action outcomes — exactly one per executed request."""

from dataclasses import dataclass

OFFLINE_ERROR = "offline"
GENERIC_CLIENT_ERROR = "generic client error"


class Outcome:
    """Base of the outcome variants."""

    @property
    def success(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(Outcome):
    message: str

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class SoftFailure(Outcome):
    """A check-in is already running; retry after ``wait_seconds``."""

    wait_seconds: int


@dataclass(frozen=True)
class HardFailure(Outcome):
    error_message: str


@dataclass(frozen=True)
class AuthRequired(Outcome):
    """Credentials are missing or invalid. Nothing was sent.

    Prompt for login, then resubmit the identical request.
    """
