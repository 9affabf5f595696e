"""
Booking management service.

Creates, edits and removes customer bookings together with their
installments and the status of the booked plot. Every write runs in a
single transaction, so a failure at any step leaves no partial rows.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.bookings.models import Customer, Installment
from apps.plots.models import Plot, PlotStatus

from .exceptions import (
    CustomerNotFoundError,
    PlotAlreadyBookedError,
    PlotNotFoundError,
    StatusLockedError,
)
from .status_transitions import (
    can_transition,
    describe_rejection,
    is_terminal,
    plot_status_for,
)

logger = logging.getLogger(__name__)


def _build_installments(customer: Customer, installments: Optional[Iterable[dict]]) -> List[Installment]:
    """Installment rows for the entries that carry a nonzero amount."""
    rows = []
    for entry in installments or []:
        amount = entry.get('amount')
        if not amount:
            continue
        rows.append(Installment(
            customer=customer,
            amount=amount,
            date_received=entry.get('date') or None,
            follow_up_date=entry.get('follow_up') or None,
        ))
    return rows


def _replace_installments(customer: Customer, installments: Optional[Iterable[dict]]) -> int:
    Installment.objects.filter(customer=customer).delete()
    rows = _build_installments(customer, installments)
    if rows:
        Installment.objects.bulk_create(rows)
    return len(rows)


def _set_plot_status(plot: Plot, status: str) -> None:
    plot.status = status
    plot.save(update_fields=['status', 'updated_at'])


@transaction.atomic
def create_booking(
    *,
    plot_key: str,
    customer_name: str,
    status: str,
    customer_phone: Optional[str] = None,
    mediator: Optional[str] = None,
    commission: Optional[Decimal] = None,
    booking_amount: Optional[Decimal] = None,
    closure_date: Optional[date] = None,
    installments: Optional[Iterable[dict]] = None,
) -> Tuple[Customer, str]:
    """
    Book a plot for a new customer.

    The plot row is locked before checking for an existing customer so
    two concurrent bookings of the same plot cannot both pass the check
    on databases with row locks.

    Args:
        plot_key: Key of the plot being booked
        customer_name: Buyer's name
        status: Booking status (reserved, booked or registered)
        customer_phone: Buyer's phone
        mediator: Referring mediator's name
        commission: Mediator commission
        booking_amount: Amount paid at booking
        closure_date: Expected closure date
        installments: Dicts with amount, date and follow_up keys

    Returns:
        Tuple of the created Customer and the plot's new status

    Raises:
        InvalidStatusError: If status is not a booking status
        PlotAlreadyBookedError: If the plot already has a customer
        PlotNotFoundError: If no plot has this key
    """
    plot_status = plot_status_for(status)

    try:
        plot = Plot.objects.select_for_update().get(plot_key=plot_key)
    except Plot.DoesNotExist:
        raise PlotNotFoundError("Plot not found.") from None

    existing_id = plot.customers.values_list('id', flat=True).first()
    if existing_id is not None:
        raise PlotAlreadyBookedError(
            "Plot already has a customer. Use edit instead.",
            existing_id=existing_id,
        )

    customer = Customer.objects.create(
        plot=plot,
        customer_name=customer_name,
        customer_phone=customer_phone or None,
        mediator_name=mediator or None,
        commission=commission or Decimal('0'),
        booking_amount=booking_amount or Decimal('0'),
        closure_date=closure_date,
        status=status,
    )

    rows = _build_installments(customer, installments)
    if rows:
        Installment.objects.bulk_create(rows)

    _set_plot_status(plot, plot_status)

    logger.info(
        "Booked plot %s for customer %s (%s, %d installments)",
        plot_key, customer.id, status, len(rows)
    )
    return customer, plot_status


@transaction.atomic
def update_booking(
    *,
    customer_id: int,
    customer_name: str,
    status: str,
    customer_phone: Optional[str] = None,
    mediator: Optional[str] = None,
    commission: Optional[Decimal] = None,
    booking_amount: Optional[Decimal] = None,
    closure_date: Optional[date] = None,
    installments: Optional[Iterable[dict]] = None,
) -> Tuple[Customer, str]:
    """
    Edit a customer booking and move its plot along the lifecycle.

    All customer fields are overwritten and the installment list is
    replaced wholesale; installment ids are not preserved.

    Returns:
        Tuple of the updated Customer and the plot's new status

    Raises:
        InvalidStatusError: If status is not a booking status
        CustomerNotFoundError: If the customer doesn't exist
        StatusLockedError: If the lifecycle forbids the status change
    """
    plot_status = plot_status_for(status)

    try:
        customer = (
            Customer.objects
            .select_for_update()
            .select_related('plot')
            .get(id=customer_id)
        )
    except Customer.DoesNotExist:
        raise CustomerNotFoundError("Customer not found.") from None

    current_status = customer.status
    if not can_transition(current_status, status):
        logger.info(
            "Refused status change %r -> %r for customer %s",
            current_status, status, customer_id
        )
        raise StatusLockedError(
            describe_rejection(current_status, status),
            current_status=current_status,
            requested_status=status,
            locked=is_terminal(current_status),
        )

    customer.customer_name = customer_name
    customer.customer_phone = customer_phone or None
    customer.mediator_name = mediator or None
    customer.commission = commission or Decimal('0')
    customer.booking_amount = booking_amount or Decimal('0')
    customer.closure_date = closure_date
    customer.status = status
    customer.save()

    count = _replace_installments(customer, installments)

    _set_plot_status(customer.plot, plot_status)

    logger.info(
        "Updated customer %s on plot %s (%s -> %s, %d installments)",
        customer_id, customer.plot.plot_key, current_status, status, count
    )
    return customer, plot_status


@transaction.atomic
def delete_booking(*, customer_id: int) -> Plot:
    """
    Remove a customer booking and release its plot.

    Deletion is allowed from every status, registered included; the
    lifecycle rules only govern edits.

    Returns:
        The released Plot

    Raises:
        CustomerNotFoundError: If the customer doesn't exist
    """
    try:
        customer = (
            Customer.objects
            .select_for_update()
            .select_related('plot')
            .get(id=customer_id)
        )
    except Customer.DoesNotExist:
        raise CustomerNotFoundError("Customer not found.") from None

    plot = customer.plot
    if is_terminal(customer.status):
        logger.warning(
            "Deleting registered customer %s on plot %s",
            customer_id, plot.plot_key
        )

    Installment.objects.filter(customer=customer).delete()
    customer.delete()
    _set_plot_status(plot, PlotStatus.AVAILABLE)

    logger.info("Deleted customer %s, plot %s is available", customer_id, plot.plot_key)
    return plot


def _with_installments(queryset: QuerySet) -> QuerySet:
    return queryset.select_related('plot').prefetch_related(
        Prefetch(
            'installments',
            queryset=Installment.objects.order_by('date_received', 'id'),
        )
    )


def list_bookings() -> QuerySet[Customer]:
    """All customers, newest first, with plot and installments loaded."""
    return _with_installments(Customer.objects.order_by('-id'))


def get_booking_for_plot(*, plot_key: str) -> Optional[Customer]:
    """Latest customer booked on the plot, or None."""
    return (
        _with_installments(Customer.objects.filter(plot__plot_key=plot_key))
        .order_by('-id')
        .first()
    )
