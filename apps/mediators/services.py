"""
Mediator lookup table.

Customers reference mediators by name only, so deleting a mediator never
touches existing bookings.
"""

from django.db import transaction

from .exceptions import MediatorNotFoundError
from .models import Mediator


def list_mediators():
    return Mediator.objects.all().order_by('name')


@transaction.atomic
def save_mediator(*, name: str, phone: str = None, location: str = None) -> Mediator:
    """
    Create a mediator, or refresh an existing one with the same name.

    An existing mediator keeps its phone and location unless a new
    non-empty value is supplied.
    """
    mediator, created = Mediator.objects.select_for_update().get_or_create(
        name=name,
        defaults={'phone': phone or None, 'location': location or None},
    )
    if created:
        return mediator

    update_fields = []
    if phone:
        mediator.phone = phone
        update_fields.append('phone')
    if location:
        mediator.location = location
        update_fields.append('location')
    if update_fields:
        mediator.save(update_fields=update_fields)
    return mediator


def delete_mediator(*, mediator_id: int) -> None:
    deleted, _ = Mediator.objects.filter(id=mediator_id).delete()
    if not deleted:
        raise MediatorNotFoundError()
