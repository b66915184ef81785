from django.db import models
import uuid

from apps.rewards.leveling import (
    Rank,
    AccountState,
    level_for_experience,
    rank_for_loyalty,
)


class TransactionType(models.TextChoices):
    CHECKIN = 'checkin', 'Check-in'
    BONUS = 'bonus', 'Bonus'
    REDEEM = 'redeem', 'Redeem'
    LEVEL_UP = 'level_up', 'Level up'


class Account(models.Model):
    """
    Per-user balances.

    ``level`` and ``rank`` are stored for cheap reads but are always
    recomputed from ``experience`` and ``loyalty`` in ``save()``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField('accounts.User', on_delete=models.CASCADE, related_name='reward_account')

    experience = models.PositiveBigIntegerField(default=0)
    loyalty = models.PositiveBigIntegerField(default=0)
    coins = models.PositiveBigIntegerField(default=0)
    gems = models.PositiveBigIntegerField(default=0)

    # Derived
    level = models.PositiveIntegerField(default=1, editable=False)
    rank = models.CharField(max_length=20, choices=Rank.choices, default=Rank.BRONZE, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reward_accounts'
        constraints = [
            models.CheckConstraint(condition=models.Q(coins__gte=0), name='account_coins_non_negative'),
            models.CheckConstraint(condition=models.Q(level__gte=1), name='account_level_positive'),
        ]

    def __str__(self):
        return f"{self.user} (Lv.{self.level}, {self.rank})"

    def save(self, *args, **kwargs):
        self.level = level_for_experience(self.experience)
        self.rank = rank_for_loyalty(self.loyalty)

        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            update_fields = set(update_fields) | {'updated_at'}
            if 'experience' in update_fields:
                update_fields.add('level')
            if 'loyalty' in update_fields:
                update_fields.add('rank')
            kwargs['update_fields'] = update_fields

        super().save(*args, **kwargs)

    def snapshot(self) -> AccountState:
        return AccountState(
            experience=self.experience,
            loyalty=self.loyalty,
            coins=self.coins,
            gems=self.gems,
            level=self.level,
            rank=self.rank,
        )

    def apply_state(self, state: AccountState):
        """Copy balances from ``state``; level and rank follow on save."""
        self.experience = state.experience
        self.loyalty = state.loyalty
        self.coins = state.coins
        self.gems = state.gems


class Visit(models.Model):
    """One rewarded check-in. Never updated after creation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='visits')
    store = models.ForeignKey('stores.Store', on_delete=models.PROTECT, related_name='visits')

    experience_earned = models.PositiveIntegerField(default=0)
    loyalty_earned = models.PositiveIntegerField(default=0)
    coins_earned = models.PositiveIntegerField(default=0)
    gems_earned = models.PositiveIntegerField(default=0)

    level_before = models.PositiveIntegerField()
    level_after = models.PositiveIntegerField()

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'store_visits'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='visit_user_created_idx'),
            models.Index(fields=['user', 'store', 'created_at'], name='visit_user_store_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} @ {self.store.name} ({self.created_at:%Y-%m-%d %H:%M})"

    @property
    def leveled_up(self):
        return self.level_after > self.level_before


class RewardTransaction(models.Model):
    """Record of a reward-granting event (check-in, bonus, ...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reward_transactions')
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='reward_transactions'
    )
    visit = models.OneToOneField(
        Visit,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='transaction'
    )

    experience = models.PositiveIntegerField(default=0)
    loyalty = models.PositiveIntegerField(default=0)
    coins = models.PositiveIntegerField(default=0)
    gems = models.PositiveIntegerField(default=0)

    type = models.CharField(max_length=20, choices=TransactionType.choices)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'reward_transactions'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='rtx_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} {self.type} +{self.experience}xp"
