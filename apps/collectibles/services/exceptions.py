"""Domain-specific exceptions for collectibles app."""


class CollectiblesServiceError(Exception):
    """Base exception for all collectibles service errors."""
    code = 'collectibles_error'


class NftNotFoundError(CollectiblesServiceError):
    """Raised when an NFT does not exist or is no longer active."""
    code = 'nft_not_found'


class RecipientNotFoundError(CollectiblesServiceError):
    """Raised when the user to award does not exist."""
    code = 'recipient_not_found'
