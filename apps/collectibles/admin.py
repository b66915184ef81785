# ==========================================
# apps/collectibles/admin.py
# ==========================================

from django.contrib import admin
from apps.collectibles.models import NftItem, UserNft


@admin.register(NftItem)
class NftItemAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'rarity', 'is_active', 'owner_count', 'created_at']
    list_filter = ['category', 'rarity', 'is_active']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at']

    def owner_count(self, obj):
        """Show how many times the NFT was awarded."""
        return obj.owners.count()
    owner_count.short_description = 'Awarded'


@admin.register(UserNft)
class UserNftAdmin(admin.ModelAdmin):
    list_display = ['user', 'nft', 'obtained_reason', 'obtained_at']
    list_filter = ['nft__rarity', 'obtained_at']
    search_fields = ['user__email', 'nft__name', 'obtained_reason']
    readonly_fields = ['obtained_at']
