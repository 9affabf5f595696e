from django.contrib import admin
from .models import Mediator


@admin.register(Mediator)
class MediatorAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'location', 'created_at']
    search_fields = ['name', 'phone', 'location']
    ordering = ['name']
