# ==========================================
# apps/coins/admin.py
# ==========================================

from django.contrib import admin
from apps.coins.models import CoinTransfer, AddressBookEntry


@admin.register(CoinTransfer)
class CoinTransferAdmin(admin.ModelAdmin):
    """Transfers are append-only; the admin is for inspection."""

    list_display = ['from_user', 'to_user', 'amount', 'status', 'type', 'created_at']
    list_filter = ['status', 'type', 'created_at']
    search_fields = ['from_user__email', 'to_user__email', 'message']
    readonly_fields = [f.name for f in CoinTransfer._meta.fields]
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False


@admin.register(AddressBookEntry)
class AddressBookEntryAdmin(admin.ModelAdmin):
    list_display = ['owner', 'nickname', 'recipient', 'is_favorite', 'created_at']
    list_filter = ['is_favorite']
    search_fields = ['owner__email', 'recipient__email', 'nickname']
    readonly_fields = ['created_at', 'updated_at']
