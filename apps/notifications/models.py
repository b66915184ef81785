# ==========================================
# apps/notifications/models.py
# ==========================================

from django.db import models
import uuid


class NotificationType(models.TextChoices):
    INFO = 'info', 'Info'
    WARNING = 'warning', 'Warning'
    SUCCESS = 'success', 'Success'
    ERROR = 'error', 'Error'


class Notification(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='notifications')
    title = models.CharField(max_length=200)
    message = models.TextField()
    type = models.CharField(max_length=20, choices=NotificationType.choices, default=NotificationType.INFO)
    is_read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notification_user_read_idx'),
            models.Index(fields=['user', 'created_at'], name='notification_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user}: {self.title}"
