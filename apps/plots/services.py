"""
Plot Services Module
====================

Inventory queries and attribute edits for land plots.

Status changes made here are direct overrides. Status changes driven by
customer bookings go through ``apps.bookings.services`` so plot and
customer stay in lockstep.
"""

import logging

from django.db import transaction
from django.utils import timezone

from .exceptions import PlotNotFoundError
from .models import Plot, PlotStatus

logger = logging.getLogger(__name__)

# Request field -> model column
EDITABLE_FIELDS = {
    'price': 'price',
    'length': 'length_ft',
    'width': 'width_ft',
    'sqft': 'sqft',
    'cent': 'cent',
    'facing': 'facing',
}


def list_plots():
    """Return all plots in layout order."""
    return Plot.objects.all().order_by('plot_num', 'plot_key')


def get_plot(*, plot_key: str) -> Plot:
    try:
        return Plot.objects.get(plot_key=plot_key)
    except Plot.DoesNotExist:
        raise PlotNotFoundError() from None


@transaction.atomic
def update_plot_details(*, plot_key: str, **changes) -> Plot:
    """
    Partially update a plot's commercial and survey details.

    Only keys listed in EDITABLE_FIELDS are considered, and a value of
    None leaves the stored value untouched.

    Raises:
        PlotNotFoundError: If no plot has this key
    """
    try:
        plot = Plot.objects.select_for_update().get(plot_key=plot_key)
    except Plot.DoesNotExist:
        raise PlotNotFoundError() from None

    update_fields = []
    for name, column in EDITABLE_FIELDS.items():
        value = changes.get(name)
        if value is None:
            continue
        setattr(plot, column, value)
        update_fields.append(column)

    if update_fields:
        update_fields.append('updated_at')
        plot.save(update_fields=update_fields)
        logger.info("Plot %s updated: %s", plot_key, ', '.join(update_fields[:-1]))

    return plot


def set_plot_status(*, plot_key: str, status: str) -> Plot:
    """
    Overwrite a plot's status.

    Raises:
        ValueError: If status is not a plot status
        PlotNotFoundError: If no plot has this key
    """
    if status not in PlotStatus.values:
        raise ValueError(f"Invalid plot status: {status!r}")

    updated = Plot.objects.filter(plot_key=plot_key).update(status=status, updated_at=timezone.now())
    if not updated:
        raise PlotNotFoundError()

    logger.info("Plot %s status set to %r", plot_key, status)
    return Plot.objects.get(plot_key=plot_key)
