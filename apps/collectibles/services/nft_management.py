"""
NFT management service.

Catalog queries and awarding collectibles to users. A user may own the
same NFT more than once; each award is its own record.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.collectibles.models import NftItem, UserNft

from .exceptions import NftNotFoundError, RecipientNotFoundError

logger = logging.getLogger(__name__)


def list_active_nfts() -> QuerySet[NftItem]:
    """Active catalog, newest first."""
    return NftItem.objects.filter(is_active=True).order_by('-created_at')


def list_user_nfts(*, user: User) -> QuerySet[UserNft]:
    """The user's collection with NFT details, most recently obtained first."""
    return (
        UserNft.objects
        .filter(user=user)
        .select_related('nft')
        .order_by('-obtained_at')
    )


def count_user_nfts(*, user: User) -> int:
    return UserNft.objects.filter(user=user).count()


@transaction.atomic
def award_nft(
    *,
    user_id: UUID,
    nft_id: UUID,
    reason: str = '',
    metadata: Optional[dict] = None
) -> UserNft:
    """
    Give an NFT to a user.

    Args:
        user_id: Recipient
        nft_id: Catalog item to award
        reason: Free text shown in the collection
        metadata: Arbitrary JSON object stored with the award

    Returns:
        Created UserNft

    Raises:
        RecipientNotFoundError: If user doesn't exist
        NftNotFoundError: If the NFT doesn't exist or is inactive
    """
    try:
        user = User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise RecipientNotFoundError(f"User {user_id} not found")

    try:
        nft = NftItem.objects.get(id=nft_id, is_active=True)
    except NftItem.DoesNotExist:
        raise NftNotFoundError(f"NFT {nft_id} not found")

    user_nft = UserNft.objects.create(
        user=user,
        nft=nft,
        obtained_reason=reason,
        metadata=metadata or {},
    )

    logger.info("Awarded NFT %s to user %s", nft.id, user.id)
    return user_nft
