"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class ConfigurationError(DomainError):
    """Raised when a trip snapshot violates an analysis precondition."""


class CheckerFailure(DomainError):
    """A single checker raised while evaluating a snapshot."""

    def __init__(self, check: str, error: Exception):
        self.check = check
        self.error = error
        super().__init__(f"[{check}] {type(error).__name__}: {error}")
