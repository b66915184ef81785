# ==========================================
# apps/rewards/admin.py
# ==========================================

from django.contrib import admin
from apps.rewards.models import Account, Visit, RewardTransaction


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """
    Balances are read-only here; changes go through check-ins,
    bonuses and transfers so level and history stay consistent.
    """

    list_display = ['user', 'level', 'rank', 'experience', 'loyalty', 'coins', 'gems', 'updated_at']
    list_filter = ['rank']
    search_fields = ['user__email', 'user__display_name']
    readonly_fields = [
        'user', 'experience', 'loyalty', 'coins', 'gems',
        'level', 'rank', 'created_at', 'updated_at'
    ]
    ordering = ['-experience']

    def has_add_permission(self, request):
        return False


@admin.register(Visit)
class VisitAdmin(admin.ModelAdmin):
    list_display = ['user', 'store', 'experience_earned', 'coins_earned', 'level_before', 'level_after', 'created_at']
    list_filter = ['store', 'created_at']
    search_fields = ['user__email', 'store__name']
    readonly_fields = [f.name for f in Visit._meta.fields]
    date_hierarchy = 'created_at'


@admin.register(RewardTransaction)
class RewardTransactionAdmin(admin.ModelAdmin):
    list_display = ['user', 'type', 'store', 'experience', 'loyalty', 'coins', 'gems', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['user__email', 'description']
    readonly_fields = [f.name for f in RewardTransaction._meta.fields]
    date_hierarchy = 'created_at'
