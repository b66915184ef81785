import uuid
import pytest

from apps.collectibles.models import NftItem, UserNft
from apps.collectibles.services import (
    list_active_nfts,
    list_user_nfts,
    count_user_nfts,
    award_nft,
)
from apps.collectibles.services.exceptions import NftNotFoundError, RecipientNotFoundError


@pytest.mark.django_db
class TestCatalog:

    def test_inactive_items_hidden(self, nft):
        NftItem.objects.create(name='Retired', is_active=False)
        assert list(list_active_nfts()) == [nft]


@pytest.mark.django_db
class TestAwardNft:
    """Tests for nft_management.award_nft."""

    def test_award(self, user, nft):
        user_nft = award_nft(user_id=user.id, nft_id=nft.id, reason='Level up', metadata={'edition': 3})

        assert user_nft.user == user
        assert user_nft.nft == nft
        assert user_nft.obtained_reason == 'Level up'
        assert user_nft.metadata == {'edition': 3}

    def test_default_metadata(self, user, nft):
        user_nft = award_nft(user_id=user.id, nft_id=nft.id)
        assert user_nft.metadata == {}

    def test_same_nft_twice(self, user, nft):
        award_nft(user_id=user.id, nft_id=nft.id)
        award_nft(user_id=user.id, nft_id=nft.id)
        assert count_user_nfts(user=user) == 2

    def test_unknown_user(self, nft):
        with pytest.raises(RecipientNotFoundError):
            award_nft(user_id=uuid.uuid4(), nft_id=nft.id)

    def test_unknown_nft(self, user):
        with pytest.raises(NftNotFoundError):
            award_nft(user_id=user.id, nft_id=uuid.uuid4())

    def test_inactive_nft(self, user, nft):
        nft.is_active = False
        nft.save()

        with pytest.raises(NftNotFoundError):
            award_nft(user_id=user.id, nft_id=nft.id)
        assert UserNft.objects.count() == 0

    def test_collection_is_per_user(self, user, other_user, nft):
        award_nft(user_id=other_user.id, nft_id=nft.id)
        assert list(list_user_nfts(user=user)) == []
        assert count_user_nfts(user=user) == 0
