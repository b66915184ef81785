"""Favorite store management."""

from uuid import UUID

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.stores.models import FavoriteStore

from .exceptions import StoreNotFoundError
from .store_management import get_store


def list_favorites(*, user: User) -> QuerySet[FavoriteStore]:
    return FavoriteStore.objects.filter(user=user).select_related('store')


def add_favorite(*, user: User, store_id: UUID) -> FavoriteStore:
    """
    Follow a store. Adding an existing favorite returns it unchanged.

    Raises:
        StoreNotFoundError: If store doesn't exist
    """
    store = get_store(store_id=store_id)

    try:
        with transaction.atomic():
            favorite, _ = FavoriteStore.objects.get_or_create(user=user, store=store)
    except IntegrityError:
        # Lost a race with a concurrent add
        favorite = FavoriteStore.objects.get(user=user, store=store)

    return favorite


def remove_favorite(*, user: User, store_id: UUID) -> None:
    """
    Raises:
        StoreNotFoundError: If the store is not among the user's favorites
    """
    deleted, _ = FavoriteStore.objects.filter(user=user, store_id=store_id).delete()
    if not deleted:
        raise StoreNotFoundError(f"Store {store_id} is not a favorite")


def is_favorite(*, user: User, store_id: UUID) -> bool:
    return FavoriteStore.objects.filter(user=user, store_id=store_id).exists()
