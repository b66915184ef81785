"""
Ledger service.

Access to per-user reward accounts. All balance mutations run inside a
transaction with the affected account rows locked (``select_for_update``),
so concurrent check-ins and transfers on the same account are serialized
and additive updates cannot be lost.
"""

import logging
from typing import Iterable
from uuid import UUID

from django.db import transaction

from apps.rewards.leveling import RewardAmounts, RewardOutcome, apply_reward
from apps.rewards.models import Account, RewardTransaction, TransactionType

from .exceptions import AccountNotFoundError

logger = logging.getLogger(__name__)


def get_account(*, user_id: UUID) -> Account:
    """
    Read a user's account without locking.

    Raises:
        AccountNotFoundError: If the user has no account
    """
    try:
        return Account.objects.select_related('user').get(user_id=user_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError(f"No reward account for user {user_id}")


def lock_account(*, user_id: UUID) -> Account:
    """
    Fetch a user's account with a row lock held until the surrounding
    transaction ends. Must be called inside ``transaction.atomic``.

    Raises:
        AccountNotFoundError: If the user has no account
    """
    try:
        return Account.objects.select_for_update().get(user_id=user_id)
    except Account.DoesNotExist:
        raise AccountNotFoundError(f"No reward account for user {user_id}")


def lock_accounts(*, user_ids: Iterable[UUID]) -> dict:
    """
    Lock several accounts at once, always in primary-key order so two
    transactions locking the same pair cannot deadlock.

    Returns:
        Dict mapping ``str(user_id)`` to Account. Users without an
        account are simply absent.
    """
    accounts = (
        Account.objects
        .select_for_update()
        .filter(user_id__in=list(user_ids))
        .order_by('pk')
    )
    return {str(account.user_id): account for account in accounts}


def credit_account(account: Account, amounts: RewardAmounts) -> RewardOutcome:
    """Apply ``amounts`` to a locked account and persist it."""
    outcome = apply_reward(account.snapshot(), amounts)
    account.apply_state(outcome.account)
    account.save()
    return outcome


@transaction.atomic
def grant_bonus(
    *,
    user_id: UUID,
    amounts: RewardAmounts,
    description: str = ''
) -> dict:
    """
    Credit a staff-granted bonus through the leveling rules.

    Args:
        user_id: Recipient user
        amounts: Currencies to grant
        description: Free text stored on the transaction

    Returns:
        Dict with ``transaction``, ``account``, ``leveled_up``,
        ``level_before`` and ``level_after``

    Raises:
        AccountNotFoundError: If the user has no account
    """
    account = lock_account(user_id=user_id)
    outcome = credit_account(account, amounts)

    reward_transaction = RewardTransaction.objects.create(
        user_id=user_id,
        type=TransactionType.BONUS,
        description=description or 'Bonus',
        **amounts.as_dict(),
    )

    logger.info(
        "Granted bonus to user %s: %s (level %s -> %s)",
        user_id, amounts.as_dict(), outcome.level_before, outcome.level_after,
    )

    return {
        'transaction': reward_transaction,
        'account': account,
        'leveled_up': outcome.leveled_up,
        'level_before': outcome.level_before,
        'level_after': outcome.level_after,
    }
