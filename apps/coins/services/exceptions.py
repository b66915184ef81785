"""
Domain-specific exceptions for coins app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CoinsServiceError(Exception):
    """Base exception for all coins service errors."""
    code = 'coins_error'


class InvalidAmountError(CoinsServiceError):
    """Raised when a transfer amount is not a positive integer."""
    code = 'invalid_amount'


class InvalidMessageError(CoinsServiceError):
    """Raised when a transfer message is too long."""
    code = 'invalid_message'


class SelfTransferError(CoinsServiceError):
    """Raised when a user tries to send coins to themselves."""
    code = 'self_transfer'


class InsufficientFundsError(CoinsServiceError):
    """Raised when the sender's balance is below the requested amount."""
    code = 'insufficient_funds'


class RecipientNotFoundError(CoinsServiceError):
    """Raised when the target user has no account."""
    code = 'recipient_not_found'


class DuplicateEntryError(CoinsServiceError):
    """Raised when an address book entry already exists for the recipient."""
    code = 'duplicate_entry'


class SelfEntryError(CoinsServiceError):
    """Raised when a user tries to save themselves in their address book."""
    code = 'self_entry'


class EntryNotFoundError(CoinsServiceError):
    """Raised when an address book entry does not exist or belongs to someone else."""
    code = 'entry_not_found'


class AddressBookWriteError(CoinsServiceError):
    """Raised when the automatic post-transfer address book write fails."""
    code = 'address_book_write_failed'
