# ==========================================
# apps/bookings/models.py
# ==========================================

from django.db import models
from decimal import Decimal


class BookingStatus(models.TextChoices):
    RESERVED = 'reserved', 'Reserved'
    BOOKED = 'booked', 'Booked'
    REGISTERED = 'registered', 'Registered'


class Customer(models.Model):
    """A booking record linking a buyer to one plot."""

    # At most one customer per plot; checked by the booking service
    # before insert rather than by a unique constraint.
    plot = models.ForeignKey(
        'plots.Plot',
        on_delete=models.PROTECT,
        related_name='customers'
    )

    customer_name = models.CharField(max_length=150)
    customer_phone = models.CharField(max_length=20, null=True, blank=True)

    # Denormalized mediator reference, no foreign key
    mediator_name = models.CharField(max_length=150, null=True, blank=True)

    # Commercial terms
    commission = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    booking_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal('0.00'))
    closure_date = models.DateField(null=True, blank=True)

    status = models.CharField(
        max_length=20,
        choices=BookingStatus.choices,
        default=BookingStatus.RESERVED
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'customers'
        indexes = [
            models.Index(fields=['status'], name='customers_status_idx'),
        ]
        ordering = ['-id']

    def __str__(self):
        return f"{self.customer_name} - {self.plot.plot_key} ({self.status})"


class Installment(models.Model):
    """Partial payment received from a customer."""

    customer = models.ForeignKey(
        Customer,
        on_delete=models.CASCADE,
        related_name='installments'
    )
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    date_received = models.DateField(null=True, blank=True)
    follow_up_date = models.DateField(null=True, blank=True)

    class Meta:
        db_table = 'installments'
        ordering = ['date_received', 'id']

    def __str__(self):
        return f"{self.amount} on {self.date_received or '-'}"
