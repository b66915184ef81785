import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.rewards.models import Account
from apps.stores.services import create_store


def client_for(user):
    """Return an API client authenticated as ``user``."""
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def other_user(db):
    """Create and return another test user."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        display_name='Other User',
    )


@pytest.fixture
def staff_user(db):
    """Create and return a staff user."""
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        display_name='Staff',
        is_staff=True,
    )


@pytest.fixture
def authenticated_client(user):
    """Return API client authenticated as user."""
    return client_for(user)


@pytest.fixture
def staff_client(staff_user):
    """Return API client authenticated as staff."""
    return client_for(staff_user)


@pytest.fixture
def store(db):
    """Store granting 25 xp, 60 loyalty, 10 coins and 1 gem per visit."""
    return create_store(
        name='Corner Cafe',
        address='1 Main Street',
        experience_per_visit=25,
        loyalty_per_visit=60,
        coins_per_visit=10,
        gems_per_visit=1,
    )


@pytest.fixture
def set_balances(db):
    """Return a helper that overwrites a user's balances."""
    def _set(user, **balances):
        account = Account.objects.get(user=user)
        for field, value in balances.items():
            setattr(account, field, value)
        account.save()
        return account
    return _set
