"""
Bookings app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations run inside a single transaction.
"""

from .exceptions import (
    BookingServiceError,
    InvalidStatusError,
    PlotNotFoundError,
    CustomerNotFoundError,
    PlotAlreadyBookedError,
    StatusLockedError,
)

from .status_transitions import (
    LIFECYCLE,
    can_transition,
    is_terminal,
    plot_status_for,
    describe_rejection,
)

from .booking_management import (
    create_booking,
    update_booking,
    delete_booking,
    list_bookings,
    get_booking_for_plot,
)


__all__ = [
    # Exceptions
    'BookingServiceError',
    'InvalidStatusError',
    'PlotNotFoundError',
    'CustomerNotFoundError',
    'PlotAlreadyBookedError',
    'StatusLockedError',

    # Lifecycle rules
    'LIFECYCLE',
    'can_transition',
    'is_terminal',
    'plot_status_for',
    'describe_rejection',

    # Booking management
    'create_booking',
    'update_booking',
    'delete_booking',
    'list_bookings',
    'get_booking_for_plot',
]
