"""
Coin transfer service.

A transfer debits the sender, credits the recipient and records a
``CoinTransfer`` in one transaction. Both account rows are locked in
primary-key order for the duration, so crossing transfers cannot
deadlock and concurrent updates cannot be lost.

Saving the recipient to the sender's address book happens afterwards and
is best effort: its failure is logged and never affects the transfer.
"""

import logging
from uuid import UUID

from django.db import transaction
from django.db.models import Q, QuerySet

from apps.accounts.models import User
from apps.coins.models import CoinTransfer, TransferStatus, TransferType
from apps.rewards.services import get_account, lock_accounts

from .address_book import upsert_on_first_transfer
from .exceptions import (
    AddressBookWriteError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidMessageError,
    RecipientNotFoundError,
    SelfTransferError,
)

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 500
HISTORY_LIMIT = 50


def _validate_transfer(*, from_user_id, to_user_id, amount, message) -> None:
    # bool is an int subclass but never a valid amount
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidAmountError("Amount must be a positive whole number of coins")

    if len(message) > MAX_MESSAGE_LENGTH:
        raise InvalidMessageError(
            f"Message must be at most {MAX_MESSAGE_LENGTH} characters"
        )

    if str(from_user_id) == str(to_user_id):
        raise SelfTransferError("Cannot transfer coins to yourself")


def transfer_coins(
    *,
    from_user_id: UUID,
    to_user_id: UUID,
    amount: int,
    message: str = ''
) -> CoinTransfer:
    """
    Move ``amount`` coins from one user to another.

    Args:
        from_user_id: Sender
        to_user_id: Recipient
        amount: Positive number of coins
        message: Optional note, at most 500 characters

    Returns:
        The completed CoinTransfer

    Raises:
        InvalidAmountError: If amount is not a positive integer
        InvalidMessageError: If message is too long
        SelfTransferError: If sender and recipient are the same user
        InsufficientFundsError: If the sender has no account or too few coins
        RecipientNotFoundError: If the recipient has no account
    """
    message = message or ''
    _validate_transfer(
        from_user_id=from_user_id,
        to_user_id=to_user_id,
        amount=amount,
        message=message,
    )

    with transaction.atomic():
        accounts = lock_accounts(user_ids=[from_user_id, to_user_id])
        sender = accounts.get(str(from_user_id))
        recipient = accounts.get(str(to_user_id))

        if sender is None or sender.coins < amount:
            raise InsufficientFundsError("Insufficient coins")
        if recipient is None:
            raise RecipientNotFoundError(f"User {to_user_id} not found")

        sender.coins -= amount
        recipient.coins += amount
        sender.save(update_fields=['coins'])
        recipient.save(update_fields=['coins'])

        coin_transfer = CoinTransfer.objects.create(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            amount=amount,
            message=message,
            status=TransferStatus.COMPLETED,
            type=TransferType.TRANSFER,
        )

    logger.info(
        "Transferred %s coins from %s to %s (transfer %s)",
        amount, from_user_id, to_user_id, coin_transfer.id,
    )

    try:
        upsert_on_first_transfer(owner_id=from_user_id, recipient=recipient.user)
    except AddressBookWriteError:
        logger.warning(
            "Transfer %s completed but address book update failed",
            coin_transfer.id,
            exc_info=True,
        )

    return coin_transfer


def get_coin_balance(*, user_id: UUID) -> int:
    """
    Raises:
        AccountNotFoundError: If the user has no account
    """
    return get_account(user_id=user_id).coins


def list_coin_transfers(*, user: User) -> QuerySet[CoinTransfer]:
    """Completed transfers sent or received by ``user``, newest first."""
    return (
        CoinTransfer.objects
        .filter(Q(from_user=user) | Q(to_user=user), status=TransferStatus.COMPLETED)
        .select_related('from_user', 'to_user')
        .order_by('-created_at')[:HISTORY_LIMIT]
    )
