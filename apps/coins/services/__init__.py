"""
Coins app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    CoinsServiceError,
    InvalidAmountError,
    InvalidMessageError,
    SelfTransferError,
    InsufficientFundsError,
    RecipientNotFoundError,
    DuplicateEntryError,
    SelfEntryError,
    EntryNotFoundError,
    AddressBookWriteError,
)

from .transfer import (
    transfer_coins,
    get_coin_balance,
    list_coin_transfers,
)

from .address_book import (
    find_entry,
    get_entry,
    list_for_owner,
    upsert_on_first_transfer,
    add_entry,
    update_entry,
    remove_entry,
)


__all__ = [
    # Exceptions
    'CoinsServiceError',
    'InvalidAmountError',
    'InvalidMessageError',
    'SelfTransferError',
    'InsufficientFundsError',
    'RecipientNotFoundError',
    'DuplicateEntryError',
    'SelfEntryError',
    'EntryNotFoundError',
    'AddressBookWriteError',

    # Transfers
    'transfer_coins',
    'get_coin_balance',
    'list_coin_transfers',

    # Address book
    'find_entry',
    'get_entry',
    'list_for_owner',
    'upsert_on_first_transfer',
    'add_entry',
    'update_entry',
    'remove_entry',
]
