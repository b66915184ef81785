"""Per-user notification inbox."""

from uuid import UUID

from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.notifications.models import Notification, NotificationType

from .exceptions import NotificationNotFoundError

INBOX_LIMIT = 20


def create_notification(
    *,
    user: User,
    title: str,
    message: str,
    type: str = NotificationType.INFO
) -> Notification:
    return Notification.objects.create(user=user, title=title, message=message, type=type)


def list_notifications(*, user: User) -> QuerySet[Notification]:
    """Latest notifications, newest first."""
    return Notification.objects.filter(user=user).order_by('-created_at')[:INBOX_LIMIT]


def count_unread(*, user: User) -> int:
    return Notification.objects.filter(user=user, is_read=False).count()


def mark_read(*, user: User, notification_id: UUID) -> Notification:
    """
    Raises:
        NotificationNotFoundError: If not found or owned by another user
    """
    try:
        notification = Notification.objects.get(id=notification_id, user=user)
    except Notification.DoesNotExist:
        raise NotificationNotFoundError(f"Notification {notification_id} not found")

    if not notification.is_read:
        notification.is_read = True
        notification.save(update_fields=['is_read', 'updated_at'])
    return notification


def mark_all_read(*, user: User) -> int:
    """Returns the number of notifications marked."""
    return (
        Notification.objects
        .filter(user=user, is_read=False)
        .update(is_read=True, updated_at=timezone.now())
    )
