"""Domain errors raised by the repository and service layers."""


class ReservationsError(Exception):
    """Base class for errors surfaced to the HTTP layer."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ReservationsError):
    """A required field is missing or a value is malformed."""

    status_code = 400


class NotFoundError(ReservationsError):
    """The operation targets an id that does not exist."""

    status_code = 404


class StoreError(ReservationsError):
    """The underlying storage failed (connectivity, constraint violation...)."""

    status_code = 500


__all__ = ["ReservationsError", "ValidationError", "NotFoundError", "StoreError"]
