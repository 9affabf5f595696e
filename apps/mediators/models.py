from django.db import models


class Mediator(models.Model):
    """Referring third party, tracked for commission purposes."""

    name = models.CharField(max_length=150, unique=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    location = models.CharField(max_length=150, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'mediators'
        ordering = ['name']

    def __str__(self):
        return self.name
