"""
Domain-specific exceptions for bookings app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class BookingServiceError(Exception):
    """Base exception for all bookings service errors."""
    pass


class InvalidStatusError(BookingServiceError):
    """Raised when a status is not one of the booking statuses."""
    pass


class PlotNotFoundError(BookingServiceError):
    """Raised when the plot being booked does not exist."""
    pass


class CustomerNotFoundError(BookingServiceError):
    """Raised when a customer booking does not exist."""
    pass


class PlotAlreadyBookedError(BookingServiceError):
    """Raised when a plot already has a customer."""

    def __init__(self, message, *, existing_id):
        super().__init__(message)
        self.existing_id = existing_id


class StatusLockedError(BookingServiceError):
    """
    Raised when a status change is not allowed by the lifecycle.

    ``locked`` is True when the booking is in its terminal status, and
    False for an ordinary backward move.
    """

    def __init__(self, message, *, current_status, requested_status, locked):
        super().__init__(message)
        self.current_status = current_status
        self.requested_status = requested_status
        self.locked = locked
