"""Domain-specific exceptions for notifications app."""


class NotificationsServiceError(Exception):
    """Base exception for all notifications service errors."""
    code = 'notifications_error'


class NotificationNotFoundError(NotificationsServiceError):
    """Raised when a notification does not exist or belongs to another user."""
    code = 'notification_not_found'
