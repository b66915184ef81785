"""Read-only views over a user's reward history."""

from django.db.models import QuerySet

from apps.accounts.models import User
from apps.rewards.models import Visit, RewardTransaction

HISTORY_LIMIT = 50
ACTIVITY_LIMIT = 20


def list_visits(*, user: User) -> QuerySet[Visit]:
    """Most recent visits first."""
    return (
        Visit.objects
        .filter(user=user)
        .select_related('store')
        .order_by('-created_at')[:HISTORY_LIMIT]
    )


def list_reward_transactions(*, user: User) -> QuerySet[RewardTransaction]:
    """Most recent reward transactions first."""
    return (
        RewardTransaction.objects
        .filter(user=user)
        .select_related('store')
        .order_by('-created_at')[:HISTORY_LIMIT]
    )


def get_activity_feed(*, user: User) -> list[dict]:
    """
    Flattened activity entries for the home/history screens.

    Returns:
        Up to 20 dicts with ``id``, ``type``, ``store_name``,
        ``description``, the four currency amounts and ``created_at``,
        newest first.
    """
    transactions = (
        RewardTransaction.objects
        .filter(user=user)
        .select_related('store')
        .order_by('-created_at')[:ACTIVITY_LIMIT]
    )
    return [
        {
            'id': t.id,
            'type': t.type,
            'store_name': t.store.name if t.store else None,
            'description': t.description,
            'experience': t.experience,
            'loyalty': t.loyalty,
            'coins': t.coins,
            'gems': t.gems,
            'created_at': t.created_at,
        }
        for t in transactions
    ]
