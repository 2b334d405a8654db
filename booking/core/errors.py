"""Domain errors raised by the services and mapped to HTTP responses."""

from fastapi import status


class BookingError(Exception):
    """Base class for failures that are reported back to the caller."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(BookingError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request.'


class UnauthorizedError(BookingError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized'


class ForbiddenError(BookingError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Forbidden'


class NotFoundError(BookingError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
