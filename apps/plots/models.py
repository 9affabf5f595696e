# ==========================================
# apps/plots/models.py
# ==========================================

from django.db import models


class PlotStatus(models.TextChoices):
    AVAILABLE = 'available', 'Available'
    BOOKED = 'booked', 'Booked'
    RESERVED = 'reserved', 'Reserved'
    REGISTRATION_DONE = 'registration done', 'Registration Done'


class Plot(models.Model):
    """A unit of land inventory on the layout map."""

    plot_key = models.CharField(max_length=50, unique=True, db_index=True)
    title = models.CharField(max_length=200, blank=True)
    plot_num = models.PositiveIntegerField(null=True, blank=True)
    stamp_num = models.CharField(max_length=50, blank=True)

    # Commercial / survey details
    price = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    length_ft = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    width_ft = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    sqft = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    cent = models.DecimalField(max_digits=10, decimal_places=3, null=True, blank=True)
    facing = models.CharField(max_length=30, blank=True)

    status = models.CharField(
        max_length=20,
        choices=PlotStatus.choices,
        default=PlotStatus.AVAILABLE,
        db_index=True,
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'plots'
        ordering = ['plot_num', 'plot_key']

    def __str__(self):
        return self.title or self.plot_key

    @property
    def is_available(self):
        return self.status == PlotStatus.AVAILABLE
