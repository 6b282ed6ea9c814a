"""
Domain Errors

Every business rule violation raised by the services is one of these.
The HTTP layer maps them to status codes in
``shared.infrastructure.exception_handler``.
"""


class DomainError(Exception):
    """Base class for expected, caller-facing failures."""

    status_code = 500
    description = 'Internal Server Error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """Referenced record is absent or the caller may not act on it."""

    status_code = 404
    description = 'Not Found'


class DomainValidationError(DomainError):
    """Input violates a business rule."""

    status_code = 400
    description = 'Bad Request'


class ConflictError(DomainError):
    """Input clashes with existing data (e.g. a duplicate e-mail)."""

    status_code = 409
    description = 'Conflict'
