"""
Collectibles app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    CollectiblesServiceError,
    NftNotFoundError,
    RecipientNotFoundError,
)

from .nft_management import (
    list_active_nfts,
    list_user_nfts,
    count_user_nfts,
    award_nft,
)


__all__ = [
    # Exceptions
    'CollectiblesServiceError',
    'NftNotFoundError',
    'RecipientNotFoundError',

    # NFTs
    'list_active_nfts',
    'list_user_nfts',
    'count_user_nfts',
    'award_nft',
]
