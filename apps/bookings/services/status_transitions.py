"""
Booking lifecycle rules.

One table defines, for every booking status, the plot status it is
mirrored to and the statuses it may move to. Both the legality check and
the customer -> plot status mapping read from it.

    reserved   -> booked, registered
    booked     -> registered
    registered -> (terminal)

Staying on the same status is always allowed, so an update that only
edits other fields never trips the lock.
"""

from typing import FrozenSet, NamedTuple

from apps.bookings.models import BookingStatus
from apps.plots.models import PlotStatus

from .exceptions import InvalidStatusError


class Stage(NamedTuple):
    plot_status: str
    next_statuses: FrozenSet[str]


LIFECYCLE = {
    BookingStatus.RESERVED.value: Stage(
        plot_status=PlotStatus.RESERVED.value,
        next_statuses=frozenset({BookingStatus.BOOKED.value, BookingStatus.REGISTERED.value}),
    ),
    BookingStatus.BOOKED.value: Stage(
        plot_status=PlotStatus.BOOKED.value,
        next_statuses=frozenset({BookingStatus.REGISTERED.value}),
    ),
    BookingStatus.REGISTERED.value: Stage(
        plot_status=PlotStatus.REGISTRATION_DONE.value,
        next_statuses=frozenset(),
    ),
}


def can_transition(current_status: str, requested_status: str) -> bool:
    """
    Return whether a booking may move from current_status to requested_status.

    An unknown current status has no allowed moves other than staying put.
    """
    if current_status == requested_status:
        return True
    stage = LIFECYCLE.get(current_status)
    if stage is None:
        return False
    return requested_status in stage.next_statuses


def is_terminal(status: str) -> bool:
    stage = LIFECYCLE.get(status)
    return stage is not None and not stage.next_statuses


def plot_status_for(status: str) -> str:
    """
    Map a booking status to the status shown on its plot.

    Raises:
        InvalidStatusError: If status is not a booking status
    """
    try:
        return LIFECYCLE[status].plot_status
    except KeyError:
        raise InvalidStatusError(f"Invalid status: {status!r}") from None


def describe_rejection(current_status: str, requested_status: str) -> str:
    """Human-readable reason for a refused status change."""
    if is_terminal(current_status):
        return "This plot is Registered: status cannot be changed."
    return f'Cannot move status from "{current_status}" back to "{requested_status}".'
