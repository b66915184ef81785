# ==========================================
# apps/collectibles/models.py
# ==========================================

from django.db import models
import uuid


class NftCategory(models.TextChoices):
    LEVELUP = 'levelup', 'Level up'
    ACHIEVEMENT = 'achievement', 'Achievement'
    EVENT = 'event', 'Event'
    SPECIAL = 'special', 'Special'


class NftRarity(models.TextChoices):
    COMMON = 'common', 'Common'
    RARE = 'rare', 'Rare'
    EPIC = 'epic', 'Epic'
    LEGENDARY = 'legendary', 'Legendary'


class NftItem(models.Model):
    """Collectible in the catalog."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image_url = models.URLField(max_length=500, blank=True)
    category = models.CharField(max_length=20, choices=NftCategory.choices, default=NftCategory.ACHIEVEMENT)
    rarity = models.CharField(max_length=20, choices=NftRarity.choices, default=NftRarity.COMMON)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'nft_items'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.rarity})"


class UserNft(models.Model):
    """A collectible owned by a user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='nfts')
    nft = models.ForeignKey(NftItem, on_delete=models.CASCADE, related_name='owners')
    obtained_at = models.DateTimeField(auto_now_add=True, db_index=True)
    obtained_reason = models.CharField(max_length=255, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'user_nfts'
        indexes = [
            models.Index(fields=['user', 'obtained_at'], name='user_nft_user_obtained_idx'),
        ]
        ordering = ['-obtained_at']

    def __str__(self):
        return f"{self.user} owns {self.nft.name}"
