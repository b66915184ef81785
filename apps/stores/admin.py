# ==========================================
# apps/stores/admin.py
# ==========================================

from django.contrib import admin
from apps.stores.models import Store, FavoriteStore, Announcement


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    """Admin interface for Stores."""

    list_display = [
        'name',
        'experience_per_visit',
        'loyalty_per_visit',
        'coins_per_visit',
        'gems_per_visit',
        'created_at'
    ]
    search_fields = ['name', 'address', 'scan_code']
    readonly_fields = ['scan_code', 'created_at', 'updated_at']
    ordering = ['name']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'address')
        }),
        ('Rewards per visit', {
            'fields': (
                'experience_per_visit',
                'loyalty_per_visit',
                'coins_per_visit',
                'gems_per_visit',
            )
        }),
        ('Check-in', {
            'fields': ('scan_code',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(FavoriteStore)
class FavoriteStoreAdmin(admin.ModelAdmin):
    list_display = ['user', 'store', 'created_at']
    search_fields = ['user__email', 'store__name']
    readonly_fields = ['created_at']


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    """Admin interface for Announcements."""

    list_display = ['title', 'store', 'priority', 'is_active', 'end_date', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['title', 'content', 'store__name']
    readonly_fields = ['created_by', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
        super().save_model(request, obj, form, change)
