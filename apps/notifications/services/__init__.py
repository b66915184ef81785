"""
Notifications app services layer.

Services contain business logic and orchestrate operations across models.
"""

from .exceptions import (
    NotificationsServiceError,
    NotificationNotFoundError,
)

from .notification_management import (
    create_notification,
    list_notifications,
    count_unread,
    mark_read,
    mark_all_read,
)


__all__ = [
    # Exceptions
    'NotificationsServiceError',
    'NotificationNotFoundError',

    # Inbox
    'create_notification',
    'list_notifications',
    'count_unread',
    'mark_read',
    'mark_all_read',
]
