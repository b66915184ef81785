"""
Check-in service.

A check-in resolves a scanned code to a store, credits the store's
per-visit reward to the user's account and records the visit::

    ReceivedCode -> Resolved(store) -> RewardComputed -> Persisted -> Done
                 \\-> Rejected(InvalidCode)

The whole sequence runs in one transaction with the user's account row
locked, so a failure at any step leaves no partial state behind.

Repeat scans of the same code are rewarded every time unless
``settings.CHECKIN_COOLDOWN_SECONDS`` is set.
"""

import logging
from datetime import timedelta
from uuid import UUID

from django.conf import settings
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.rewards.leveling import RewardAmounts
from apps.rewards.models import Visit, RewardTransaction, TransactionType
from apps.notifications.models import NotificationType
from apps.notifications.services import create_notification
from apps.stores.services import get_store_by_scan_code

from .exceptions import InvalidCodeError, CheckInCooldownError
from .ledger import lock_account, credit_account

logger = logging.getLogger(__name__)


def _check_cooldown(*, user_id: UUID, store) -> None:
    cooldown = getattr(settings, 'CHECKIN_COOLDOWN_SECONDS', 0)
    if cooldown <= 0:
        return

    since = timezone.now() - timedelta(seconds=cooldown)
    recent = Visit.objects.filter(user_id=user_id, store=store, created_at__gte=since)
    if recent.exists():
        raise CheckInCooldownError(
            f"Already checked in at {store.name} in the last {cooldown} seconds"
        )


@transaction.atomic
def check_in(*, user: User, scan_code: str) -> dict:
    """
    Redeem a store's scan code for its per-visit reward.

    Args:
        user: Authenticated user checking in
        scan_code: Payload read from the store's QR code

    Returns:
        Dict containing:
            - visit (Visit): The recorded visit
            - transaction (RewardTransaction): The ``checkin`` transaction
            - account (Account): The updated account
            - rewards (dict): experience/loyalty/coins/gems granted
            - leveled_up (bool)
            - level_before (int)
            - level_after (int)
            - store_name (str)

    Raises:
        InvalidCodeError: If no store matches the code
        AccountNotFoundError: If the user has no account
        CheckInCooldownError: If the cooldown window is enabled and not elapsed
    """
    store = get_store_by_scan_code(scan_code=scan_code)
    if store is None:
        raise InvalidCodeError("Invalid QR code")

    # Lock before reading balances; serializes concurrent check-ins
    account = lock_account(user_id=user.id)

    _check_cooldown(user_id=user.id, store=store)

    reward = RewardAmounts.from_store(store)
    outcome = credit_account(account, reward)

    visit = Visit.objects.create(
        user=user,
        store=store,
        experience_earned=reward.experience,
        loyalty_earned=reward.loyalty,
        coins_earned=reward.coins,
        gems_earned=reward.gems,
        level_before=outcome.level_before,
        level_after=outcome.level_after,
    )

    reward_transaction = RewardTransaction.objects.create(
        user=user,
        store=store,
        visit=visit,
        type=TransactionType.CHECKIN,
        description=f"Check-in at {store.name}",
        **reward.as_dict(),
    )

    if outcome.leveled_up:
        create_notification(
            user=user,
            title="Level up!",
            message=f"You reached level {outcome.level_after}.",
            type=NotificationType.SUCCESS,
        )

    logger.info(
        "User %s checked in at store %s: %s (level %s -> %s)",
        user.id, store.id, reward.as_dict(), outcome.level_before, outcome.level_after,
    )

    return {
        'visit': visit,
        'transaction': reward_transaction,
        'account': account,
        'rewards': reward.as_dict(),
        'leveled_up': outcome.leveled_up,
        'level_before': outcome.level_before,
        'level_after': outcome.level_after,
        'store_name': store.name,
    }
