"""Domain layer exceptions."""


class RidingTallyError(Exception):
    """Base class for all ridingtally errors."""

    def __init__(self, message: str, details: dict[str, object] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DomainError(RidingTallyError):
    """A domain invariant was violated."""


class InvalidPollError(DomainError):
    """A poll record carries values the domain cannot accept."""

    def __init__(self, reason: str, riding: str | None = None):
        details: dict[str, object] = {"reason": reason}
        if riding is not None:
            details["riding"] = riding
        super().__init__(f"Invalid poll: {reason}", details)
        self.reason = reason
