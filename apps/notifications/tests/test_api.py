import uuid
import pytest
from django.urls import reverse
from rest_framework import status

from apps.notifications.models import Notification
from apps.notifications.services import create_notification


@pytest.mark.django_db
class TestNotificationEndpoints:
    """Tests for /api/notifications/"""

    def test_list(self, authenticated_client, user):
        create_notification(user=user, title='Welcome', message='Hi')

        response = authenticated_client.get(reverse('notifications:list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['title'] == 'Welcome'
        assert response.data[0]['is_read'] is False

    def test_unread_count(self, authenticated_client, user):
        create_notification(user=user, title='A', message='x')
        create_notification(user=user, title='B', message='x')

        response = authenticated_client.get(reverse('notifications:unread-count'))

        assert response.data == {'count': 2}

    def test_mark_read(self, authenticated_client, user):
        notification = create_notification(user=user, title='A', message='x')

        url = reverse('notifications:read', kwargs={'notification_id': notification.id})
        response = authenticated_client.patch(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_read'] is True

    def test_mark_read_not_owner(self, other_client, user):
        notification = create_notification(user=user, title='A', message='x')

        url = reverse('notifications:read', kwargs={'notification_id': notification.id})
        response = other_client.patch(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'notification_not_found'

    def test_mark_read_unknown(self, authenticated_client):
        url = reverse('notifications:read', kwargs={'notification_id': uuid.uuid4()})
        response = authenticated_client.patch(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_mark_all_read(self, authenticated_client, user):
        create_notification(user=user, title='A', message='x')
        create_notification(user=user, title='B', message='x')

        response = authenticated_client.patch(reverse('notifications:mark-all-read'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'updated': 2}
        assert not Notification.objects.filter(user=user, is_read=False).exists()

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('notifications:list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED
