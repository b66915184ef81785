# ==========================================
# apps/stores/models.py
# ==========================================

from django.db import models
import uuid
import secrets


def generate_scan_code():
    return secrets.token_hex(16)


class Store(models.Model):
    """Participating store with its per-visit reward configuration."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    address = models.TextField(blank=True)

    # Payload of the store's QR code
    scan_code = models.CharField(max_length=64, unique=True, db_index=True, editable=False)

    # Reward granted per check-in
    experience_per_visit = models.PositiveIntegerField(default=50)
    loyalty_per_visit = models.PositiveIntegerField(default=50)
    coins_per_visit = models.PositiveIntegerField(default=10)
    gems_per_visit = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'stores'
        ordering = ['name']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.scan_code:
            self.scan_code = generate_scan_code()
        super().save(*args, **kwargs)


class FavoriteStore(models.Model):
    """Store a user follows; drives which announcements they see."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='favorite_stores')
    store = models.ForeignKey(Store, on_delete=models.CASCADE, related_name='favorited_by')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'favorite_stores'
        unique_together = [['user', 'store']]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} -> {self.store.name}"


class Announcement(models.Model):
    """News item, either global (no store) or published by one store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    store = models.ForeignKey(
        Store,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='announcements'
    )
    title = models.CharField(max_length=200)
    content = models.TextField()
    priority = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)
    end_date = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='announcements'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'announcements'
        indexes = [
            models.Index(fields=['is_active', 'priority'], name='announcement_active_prio_idx'),
        ]
        ordering = ['-priority', '-created_at']

    def __str__(self):
        return self.title
