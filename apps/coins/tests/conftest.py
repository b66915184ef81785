import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.rewards.models import Account


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
def sender(db):
    """Create and return the sending user."""
    return User.objects.create_user(
        email='sender@example.com',
        password='TestPass123!',
        display_name='Sender',
    )


@pytest.fixture
def recipient(db):
    """Create and return the receiving user."""
    return User.objects.create_user(
        email='recipient@example.com',
        password='TestPass123!',
        display_name='Recipient',
    )


@pytest.fixture
def third_user(db):
    return User.objects.create_user(
        email='third@example.com',
        password='TestPass123!',
        display_name='Third',
    )


@pytest.fixture
def authenticated_client(sender):
    """Return API client authenticated as the sender."""
    return client_for(sender)


@pytest.fixture
def set_coins(db):
    """Return a helper that overwrites a user's coin balance."""
    def _set(user, coins):
        Account.objects.filter(user=user).update(coins=coins)
    return _set


@pytest.fixture
def client_factory(db):
    """Return a helper building an authenticated client for any user."""
    return client_for
