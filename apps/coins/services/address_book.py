"""
Address book service.

Saved transfer recipients, unique per (owner, recipient). Entries are
created explicitly by the owner (strict, duplicates rejected) or
automatically after the first transfer to a recipient (get-or-create).
"""

from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError, DatabaseError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.coins.models import AddressBookEntry

from .exceptions import (
    AddressBookWriteError,
    DuplicateEntryError,
    EntryNotFoundError,
    RecipientNotFoundError,
    SelfEntryError,
)


def default_nickname(recipient: User) -> str:
    """Recipient's display name, falling back to their id."""
    return recipient.display_name or str(recipient.id)


def find_entry(*, owner_id: UUID, recipient_id: UUID) -> Optional[AddressBookEntry]:
    return AddressBookEntry.objects.filter(owner_id=owner_id, recipient_id=recipient_id).first()


def get_entry(*, owner: User, entry_id: UUID) -> AddressBookEntry:
    """
    Raises:
        EntryNotFoundError: If the entry doesn't exist or isn't owned by ``owner``
    """
    try:
        return AddressBookEntry.objects.select_related('recipient').get(id=entry_id, owner=owner)
    except AddressBookEntry.DoesNotExist:
        raise EntryNotFoundError(f"Address book entry {entry_id} not found")


def list_for_owner(*, owner: User) -> QuerySet[AddressBookEntry]:
    """Favorites first, then newest first."""
    return (
        AddressBookEntry.objects
        .filter(owner=owner)
        .select_related('recipient')
        .order_by('-is_favorite', '-created_at')
    )


def upsert_on_first_transfer(*, owner_id: UUID, recipient: User) -> AddressBookEntry:
    """
    Ensure ``owner`` has an entry for ``recipient``; an existing entry is
    left untouched.

    Runs in its own savepoint so a failure never disturbs the caller's
    transaction.

    Raises:
        AddressBookWriteError: On any database failure
    """
    try:
        with transaction.atomic():
            entry, _ = AddressBookEntry.objects.get_or_create(
                owner_id=owner_id,
                recipient=recipient,
                defaults={
                    'nickname': default_nickname(recipient),
                    'is_favorite': False,
                },
            )
    except DatabaseError as e:
        raise AddressBookWriteError(
            f"Could not record {recipient.id} in address book of {owner_id}"
        ) from e

    return entry


@transaction.atomic
def add_entry(
    *,
    owner: User,
    recipient_id: UUID,
    nickname: str = '',
    is_favorite: bool = False
) -> AddressBookEntry:
    """
    Explicitly add a recipient to the owner's address book.

    Args:
        owner: Address book owner
        recipient_id: User to save
        nickname: Label shown in the address book; blank uses the default
        is_favorite: Pin the entry to the top

    Returns:
        Created AddressBookEntry

    Raises:
        RecipientNotFoundError: If recipient doesn't exist
        SelfEntryError: If the owner tries to save themselves
        DuplicateEntryError: If the recipient is already saved
    """
    if str(recipient_id) == str(owner.id):
        raise SelfEntryError("Cannot add yourself to your address book")

    try:
        recipient = User.objects.get(id=recipient_id)
    except User.DoesNotExist:
        raise RecipientNotFoundError(f"User {recipient_id} not found")

    if AddressBookEntry.objects.filter(owner=owner, recipient=recipient).exists():
        raise DuplicateEntryError("Recipient is already in your address book")

    try:
        with transaction.atomic():
            return AddressBookEntry.objects.create(
                owner=owner,
                recipient=recipient,
                nickname=nickname.strip() or default_nickname(recipient),
                is_favorite=is_favorite,
            )
    except IntegrityError:
        # Concurrent add or post-transfer upsert won
        raise DuplicateEntryError("Recipient is already in your address book")


@transaction.atomic
def update_entry(
    *,
    owner: User,
    entry_id: UUID,
    nickname: Optional[str] = None,
    is_favorite: Optional[bool] = None
) -> AddressBookEntry:
    """
    Partially update an entry. Only supplied fields change.

    Raises:
        EntryNotFoundError: If the entry doesn't exist or isn't owned by ``owner``
    """
    try:
        entry = AddressBookEntry.objects.select_for_update().get(id=entry_id, owner=owner)
    except AddressBookEntry.DoesNotExist:
        raise EntryNotFoundError(f"Address book entry {entry_id} not found")

    update_fields = ['updated_at']
    if nickname is not None:
        entry.nickname = nickname
        update_fields.append('nickname')
    if is_favorite is not None:
        entry.is_favorite = is_favorite
        update_fields.append('is_favorite')

    entry.save(update_fields=update_fields)
    return entry


def remove_entry(*, owner: User, entry_id: UUID) -> None:
    """
    Raises:
        EntryNotFoundError: If the entry doesn't exist or isn't owned by ``owner``
    """
    deleted, _ = AddressBookEntry.objects.filter(id=entry_id, owner=owner).delete()
    if not deleted:
        raise EntryNotFoundError(f"Address book entry {entry_id} not found")
