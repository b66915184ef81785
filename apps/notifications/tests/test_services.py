import uuid
import pytest

from apps.notifications.models import Notification, NotificationType
from apps.notifications.services import (
    create_notification,
    list_notifications,
    count_unread,
    mark_read,
    mark_all_read,
)
from apps.notifications.services.exceptions import NotificationNotFoundError


def notify(user, title='Hello'):
    return create_notification(user=user, title=title, message='Body')


@pytest.mark.django_db
class TestNotifications:
    """Tests for notification_management.py service functions."""

    def test_create_defaults_to_info(self, user):
        notification = notify(user)
        assert notification.type == NotificationType.INFO
        assert notification.is_read is False

    def test_list_newest_first_and_capped(self, user):
        for i in range(25):
            notify(user, title=f'#{i}')

        notifications = list(list_notifications(user=user))
        assert len(notifications) == 20
        timestamps = [n.created_at for n in notifications]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_count_unread(self, user, other_user):
        notify(user)
        notify(user)
        notify(other_user)
        assert count_unread(user=user) == 2

    def test_mark_read(self, user):
        notification = notify(user)

        mark_read(user=user, notification_id=notification.id)

        notification.refresh_from_db()
        assert notification.is_read is True
        assert count_unread(user=user) == 0

    def test_mark_read_twice(self, user):
        notification = notify(user)
        mark_read(user=user, notification_id=notification.id)
        assert mark_read(user=user, notification_id=notification.id).is_read is True

    def test_mark_read_other_users_notification(self, user, other_user):
        notification = notify(other_user)

        with pytest.raises(NotificationNotFoundError):
            mark_read(user=user, notification_id=notification.id)

        notification.refresh_from_db()
        assert notification.is_read is False

    def test_mark_read_unknown(self, user):
        with pytest.raises(NotificationNotFoundError):
            mark_read(user=user, notification_id=uuid.uuid4())

    def test_mark_all_read(self, user, other_user):
        notify(user)
        notify(user)
        mark_read(user=user, notification_id=notify(user).id)
        notify(other_user)

        assert mark_all_read(user=user) == 2
        assert count_unread(user=user) == 0
        assert Notification.objects.filter(user=other_user, is_read=False).count() == 1
