"""
Announcement queries.

An announcement is visible while ``is_active`` is set and its ``end_date``
(if any) has not passed. Global announcements have no store.
"""

from django.db.models import Q, QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.stores.models import Announcement, FavoriteStore


def list_active_announcements() -> QuerySet[Announcement]:
    """Visible announcements, highest priority then newest first."""
    now = timezone.now()
    return (
        Announcement.objects
        .filter(is_active=True)
        .filter(Q(end_date__isnull=True) | Q(end_date__gt=now))
        .select_related('store')
        .order_by('-priority', '-created_at')
    )


def list_announcements_for_user(*, user: User) -> QuerySet[Announcement]:
    """Global announcements plus those of the user's favorite stores."""
    favorite_store_ids = FavoriteStore.objects.filter(user=user).values('store_id')
    return list_active_announcements().filter(
        Q(store__isnull=True) | Q(store_id__in=favorite_store_ids)
    )
