"""Typed application errors mapped to HTTP responses by the app factory."""


class AppError(Exception):
    """Base error carrying a client-safe message and HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """User input is malformed (name, date, reps/weight, set count)."""

    status_code = 400


class NotFoundError(AppError):
    status_code = 404
