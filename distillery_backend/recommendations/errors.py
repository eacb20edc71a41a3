from __future__ import annotations

INVALID_INPUT_MESSAGE = "Array of bourbon IDs required"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class InvalidInputError(ValueError):
    """The request did not carry a list of integer bourbon ids."""

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class InternalError(RuntimeError):
    """Unexpected failure while scoring; details stay in the logs."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
