# ==========================================
# apps/coins/models.py
# ==========================================

from django.db import models
import uuid


class TransferStatus(models.TextChoices):
    COMPLETED = 'completed', 'Completed'
    PENDING = 'pending', 'Pending'
    CANCELLED = 'cancelled', 'Cancelled'


class TransferType(models.TextChoices):
    TRANSFER = 'transfer', 'Transfer'
    GIFT = 'gift', 'Gift'
    REWARD = 'reward', 'Reward'


class CoinTransfer(models.Model):
    """Movement of coins between two users. Append-only."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # Null sender means a system grant
    from_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='coin_transfers_sent'
    )
    to_user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='coin_transfers_received'
    )
    amount = models.PositiveBigIntegerField()
    message = models.CharField(max_length=500, blank=True)
    status = models.CharField(
        max_length=20,
        choices=TransferStatus.choices,
        default=TransferStatus.COMPLETED
    )
    type = models.CharField(
        max_length=20,
        choices=TransferType.choices,
        default=TransferType.TRANSFER
    )
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'coin_transfers'
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='coin_transfer_amount_positive'),
        ]
        indexes = [
            models.Index(fields=['from_user', 'created_at'], name='transfer_from_created_idx'),
            models.Index(fields=['to_user', 'created_at'], name='transfer_to_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.from_user} -> {self.to_user}: {self.amount}"


class AddressBookEntry(models.Model):
    """A saved transfer recipient, one per (owner, recipient) pair."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    owner = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='address_book')
    recipient = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='address_book_mentions')
    nickname = models.CharField(max_length=100)
    is_favorite = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'address_book_entries'
        constraints = [
            models.UniqueConstraint(fields=['owner', 'recipient'], name='unique_address_book_entry'),
        ]
        ordering = ['-is_favorite', '-created_at']

    def __str__(self):
        return f"{self.owner}: {self.nickname}"
