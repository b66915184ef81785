import pytest
from django.urls import reverse
from rest_framework import status

from apps.stores.models import Store, FavoriteStore, Announcement


# =============================================================================
# Store Tests
# =============================================================================

@pytest.mark.django_db
class TestStoreEndpoints:
    """Tests for /api/stores/"""

    def test_list_stores(self, authenticated_client, store):
        response = authenticated_client.get(reverse('stores:store-list'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['name'] == 'Corner Cafe'
        assert 'scan_code' not in response.data[0]

    def test_staff_sees_scan_code(self, staff_client, store):
        url = reverse('stores:store-detail', kwargs={'pk': store.id})
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['scan_code'] == store.scan_code

    def test_staff_creates_store(self, staff_client):
        response = staff_client.post(reverse('stores:store-list'), {
            'name': 'Flagship',
            'experience_per_visit': 120,
            'coins_per_visit': 25,
        })

        assert response.status_code == status.HTTP_201_CREATED
        store = Store.objects.get(name='Flagship')
        assert store.experience_per_visit == 120
        assert store.loyalty_per_visit == 50
        assert response.data['scan_code'] == store.scan_code

    def test_scan_code_is_read_only(self, staff_client, store):
        url = reverse('stores:store-detail', kwargs={'pk': store.id})
        response = staff_client.patch(url, {'scan_code': 'hijacked', 'coins_per_visit': 99})

        assert response.status_code == status.HTTP_200_OK
        store.refresh_from_db()
        assert store.scan_code != 'hijacked'
        assert store.coins_per_visit == 99

    def test_negative_reward_rejected(self, staff_client):
        response = staff_client.post(reverse('stores:store-list'), {
            'name': 'Broken',
            'coins_per_visit': -1,
        })

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_non_staff_cannot_create(self, authenticated_client):
        response = authenticated_client.post(reverse('stores:store-list'), {'name': 'Nope'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert not Store.objects.filter(name='Nope').exists()

    def test_delete_not_allowed(self, staff_client, store):
        url = reverse('stores:store-detail', kwargs={'pk': store.id})
        response = staff_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_qr_code(self, staff_client, store):
        url = reverse('stores:store-qr', kwargs={'pk': store.id})
        response = staff_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['qr_code'].startswith('data:image/png;base64,')

    def test_qr_code_staff_only(self, authenticated_client, store):
        url = reverse('stores:store-qr', kwargs={'pk': store.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_unauthenticated(self, api_client):
        response = api_client.get(reverse('stores:store-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Favorite Store Tests
# =============================================================================

@pytest.mark.django_db
class TestFavoriteStoreEndpoints:
    """Tests for /api/favorite-stores/"""

    def test_add_and_list(self, authenticated_client, store):
        url = reverse('stores:favorite-stores')

        response = authenticated_client.post(url, {'store_id': str(store.id)})
        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['store_name'] == 'Corner Cafe'

        response = authenticated_client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert [f['store_id'] for f in response.data] == [str(store.id)]

    def test_add_unknown_store(self, authenticated_client):
        response = authenticated_client.post(
            reverse('stores:favorite-stores'),
            {'store_id': '00000000-0000-0000-0000-000000000000'}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['code'] == 'store_not_found'

    def test_remove(self, authenticated_client, user, store):
        FavoriteStore.objects.create(user=user, store=store)

        url = reverse('stores:favorite-store-remove', kwargs={'store_id': store.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not FavoriteStore.objects.filter(user=user).exists()

    def test_remove_missing(self, authenticated_client, store):
        url = reverse('stores:favorite-store-remove', kwargs={'store_id': store.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Announcement Tests
# =============================================================================

@pytest.mark.django_db
class TestAnnouncementEndpoints:
    """Tests for /api/announcements/"""

    def test_list_hides_inactive(self, authenticated_client):
        Announcement.objects.create(title='Live', content='x')
        Announcement.objects.create(title='Hidden', content='x', is_active=False)

        response = authenticated_client.get(reverse('stores:announcement-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [a['title'] for a in response.data] == ['Live']

    def test_filtered(self, authenticated_client, user, store, other_store):
        Announcement.objects.create(title='Global', content='x')
        Announcement.objects.create(title='Mine', content='x', store=store)
        Announcement.objects.create(title='Not mine', content='x', store=other_store)
        FavoriteStore.objects.create(user=user, store=store)

        response = authenticated_client.get(reverse('stores:announcement-filtered'))

        assert response.status_code == status.HTTP_200_OK
        assert {a['title'] for a in response.data} == {'Global', 'Mine'}

    def test_staff_creates_announcement(self, staff_client, staff_user, store):
        response = staff_client.post(reverse('stores:announcement-list'), {
            'title': 'Sale',
            'content': 'Half price',
            'store_id': str(store.id),
            'priority': 3,
        })

        assert response.status_code == status.HTTP_201_CREATED
        announcement = Announcement.objects.get(title='Sale')
        assert announcement.store == store
        assert announcement.created_by == staff_user

    def test_staff_can_edit_inactive(self, staff_client):
        announcement = Announcement.objects.create(title='Draft', content='x', is_active=False)
        url = reverse('stores:announcement-detail', kwargs={'pk': announcement.id})

        response = staff_client.patch(url, {'is_active': True})

        assert response.status_code == status.HTTP_200_OK
        announcement.refresh_from_db()
        assert announcement.is_active is True

    def test_non_staff_cannot_create(self, authenticated_client):
        response = authenticated_client.post(reverse('stores:announcement-list'), {
            'title': 'Spam',
            'content': 'x',
        })

        assert response.status_code == status.HTTP_403_FORBIDDEN
