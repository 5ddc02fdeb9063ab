class BoardError(Exception):
    """Base class for recoverable errors raised by the board services."""

    status_code = 400


class BoardValidationError(BoardError, ValueError):
    """Input rejected before anything was mutated."""

    status_code = 400


class NotFoundError(BoardError, LookupError):
    status_code = 404


class InvalidTransitionError(BoardError, ValueError):
    """A status move the lifecycle tables do not allow."""

    status_code = 409
