from django.contrib import admin
from django.utils.html import format_html
from .models import Plot, PlotStatus


STATUS_COLORS = {
    PlotStatus.AVAILABLE: ('#6B8E5E', 'white'),
    PlotStatus.RESERVED: ('#E5C49A', '#2C1810'),
    PlotStatus.BOOKED: ('#A47449', 'white'),
    PlotStatus.REGISTRATION_DONE: ('#4A5A78', 'white'),
}


@admin.register(Plot)
class PlotAdmin(admin.ModelAdmin):
    list_display = [
        'plot_key',
        'title',
        'plot_num',
        'price',
        'sqft',
        'facing',
        'status_badge',
    ]
    list_filter = ['status', 'facing']
    search_fields = ['plot_key', 'title', 'stamp_num']
    ordering = ['plot_num', 'plot_key']
    readonly_fields = ['created_at', 'updated_at']

    def status_badge(self, obj):
        """Display plot status as colored badge."""
        bg, fg = STATUS_COLORS.get(obj.status, ('#ccc', '#666'))
        return format_html(
            '<span style="background: {}; color: {}; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, fg, obj.get_status_display()
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'
