# ==========================================
# apps/bookings/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Customer, Installment, BookingStatus
from .utils import format_inr


class InstallmentInline(admin.TabularInline):
    """Inline admin for installments within a customer booking."""
    model = Installment
    extra = 0
    fields = ['amount', 'date_received', 'follow_up_date']


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """
    Admin interface for customer bookings.

    Status is read-only here: status changes go through the API so the
    plot status is moved in the same transaction.
    """

    list_display = [
        'customer_name',
        'get_plot_key',
        'mediator_name',
        'get_booking_amount',
        'status_badge',
        'closure_date',
    ]
    list_filter = ['status', 'closure_date']
    search_fields = ['customer_name', 'customer_phone', 'mediator_name', 'plot__plot_key']
    readonly_fields = ['status', 'created_at', 'updated_at']
    inlines = [InstallmentInline]

    def get_queryset(self, request):
        """Optimize query."""
        return super().get_queryset(request).select_related('plot')

    def get_plot_key(self, obj):
        return obj.plot.plot_key
    get_plot_key.short_description = 'Plot'
    get_plot_key.admin_order_field = 'plot__plot_key'

    def get_booking_amount(self, obj):
        return format_inr(obj.booking_amount)
    get_booking_amount.short_description = 'Booking Amount'

    def status_badge(self, obj):
        """Display booking status as colored badge."""
        colors = {
            BookingStatus.RESERVED: ('#E5C49A', '#2C1810'),
            BookingStatus.BOOKED: ('#A47449', 'white'),
            BookingStatus.REGISTERED: ('#4A5A78', 'white'),
        }
        bg, fg = colors.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
