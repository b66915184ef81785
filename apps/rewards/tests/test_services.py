"""
Service layer tests for rewards app.

Tests cover:
- Check-in flow and its all-or-nothing persistence
- Leveling applied through the database path
- Bonus grants
- History queries
- Concurrency protection (lost updates)
"""

import pytest
import threading
from unittest.mock import patch
from django.db import DatabaseError, connection
from django.test import TransactionTestCase

from apps.accounts.models import User
from apps.notifications.models import Notification
from apps.rewards.leveling import Rank, RewardAmounts
from apps.rewards.models import Account, Visit, RewardTransaction, TransactionType
from apps.rewards.services import (
    check_in,
    grant_bonus,
    get_account,
    lock_accounts,
    list_visits,
    list_reward_transactions,
    get_activity_feed,
)
from apps.rewards.services.exceptions import (
    InvalidCodeError,
    AccountNotFoundError,
    CheckInCooldownError,
)
from apps.stores.services import create_store


# =============================================================================
# Account Model Tests
# =============================================================================

@pytest.mark.django_db
class TestAccount:
    """Tests for the Account model and its creation."""

    def test_create_user_creates_account(self, user):
        account = Account.objects.get(user=user)
        assert account.experience == 0
        assert account.coins == 0
        assert account.level == 1
        assert account.rank == Rank.BRONZE

    def test_save_recomputes_level_and_rank(self, user):
        account = Account.objects.get(user=user)
        account.experience = 250
        account.loyalty = 5000
        account.save()

        account.refresh_from_db()
        assert account.level == 3
        assert account.rank == Rank.GOLD

    def test_save_with_update_fields_keeps_derived_fields_in_sync(self, user):
        account = Account.objects.get(user=user)
        account.experience = 100
        account.save(update_fields=['experience'])

        account.refresh_from_db()
        assert account.level == 2

    def test_direct_level_assignment_is_overwritten(self, user):
        account = Account.objects.get(user=user)
        account.level = 42
        account.save()

        account.refresh_from_db()
        assert account.level == 1

    def test_get_account_missing(self, user):
        Account.objects.filter(user=user).delete()
        with pytest.raises(AccountNotFoundError):
            get_account(user_id=user.id)

    def test_lock_accounts_keys_by_user_id(self, user, other_user):
        accounts = lock_accounts(user_ids=[user.id, other_user.id])
        assert set(accounts) == {str(user.id), str(other_user.id)}


# =============================================================================
# Check-in Service Tests
# =============================================================================

@pytest.mark.django_db
class TestCheckIn:
    """Tests for checkin.py service functions."""

    def test_check_in_end_to_end(self, user, store, set_balances):
        """90 xp / 950 loyalty / 5 coins + (25, 60, 10, 1) levels up to silver."""
        set_balances(user, experience=90, loyalty=950, coins=5)

        result = check_in(user=user, scan_code=store.scan_code)

        account = Account.objects.get(user=user)
        assert account.experience == 115
        assert account.loyalty == 1010
        assert account.coins == 15
        assert account.gems == 1
        assert account.level == 2
        assert account.rank == Rank.SILVER

        assert result['leveled_up'] is True
        assert result['level_before'] == 1
        assert result['level_after'] == 2
        assert result['store_name'] == 'Corner Cafe'
        assert result['rewards'] == {'experience': 25, 'loyalty': 60, 'coins': 10, 'gems': 1}
        assert result['account'].experience == 115

    def test_check_in_records_visit_and_transaction(self, user, store):
        result = check_in(user=user, scan_code=store.scan_code)

        visit = Visit.objects.get(user=user)
        assert visit == result['visit']
        assert visit.store == store
        assert visit.experience_earned == 25
        assert visit.loyalty_earned == 60
        assert visit.coins_earned == 10
        assert visit.gems_earned == 1
        assert visit.level_before == 1
        assert visit.level_after == 1

        transaction = RewardTransaction.objects.get(user=user)
        assert transaction == result['transaction']
        assert transaction.type == TransactionType.CHECKIN
        assert transaction.description == 'Check-in at Corner Cafe'
        assert transaction.visit == visit
        assert transaction.experience == 25

    def test_check_in_strips_whitespace(self, user, store):
        check_in(user=user, scan_code=f'  {store.scan_code}\n')
        assert Visit.objects.filter(user=user).count() == 1

    @pytest.mark.parametrize('code', ['', '   ', 'not-a-store-code'])
    def test_invalid_code_writes_nothing(self, user, store, code):
        with pytest.raises(InvalidCodeError):
            check_in(user=user, scan_code=code)

        account = Account.objects.get(user=user)
        assert account.experience == 0
        assert Visit.objects.count() == 0
        assert RewardTransaction.objects.count() == 0

    def test_repeat_scans_are_rewarded(self, user, store):
        """Without a cooldown every scan is a visit."""
        for _ in range(3):
            check_in(user=user, scan_code=store.scan_code)

        account = Account.objects.get(user=user)
        assert account.experience == 75
        assert Visit.objects.filter(user=user).count() == 3

    def test_cooldown_rejects_repeat_scan(self, user, store, settings):
        settings.CHECKIN_COOLDOWN_SECONDS = 3600

        check_in(user=user, scan_code=store.scan_code)
        with pytest.raises(CheckInCooldownError):
            check_in(user=user, scan_code=store.scan_code)

        account = Account.objects.get(user=user)
        assert account.experience == 25
        assert Visit.objects.filter(user=user).count() == 1

    def test_cooldown_is_per_store(self, user, store, settings):
        settings.CHECKIN_COOLDOWN_SECONDS = 3600
        other_store = create_store(name='Book Nook', experience_per_visit=5)

        check_in(user=user, scan_code=store.scan_code)
        check_in(user=user, scan_code=other_store.scan_code)

        assert Visit.objects.filter(user=user).count() == 2

    def test_missing_account(self, user, store):
        Account.objects.filter(user=user).delete()
        with pytest.raises(AccountNotFoundError):
            check_in(user=user, scan_code=store.scan_code)
        assert Visit.objects.count() == 0

    def test_failure_mid_check_in_rolls_back(self, user, store):
        """A failing transaction insert undoes the account update and visit."""
        with patch.object(RewardTransaction.objects, 'create', side_effect=DatabaseError('boom')):
            with pytest.raises(DatabaseError):
                check_in(user=user, scan_code=store.scan_code)

        account = Account.objects.get(user=user)
        assert account.experience == 0
        assert account.coins == 0
        assert Visit.objects.count() == 0

    def test_level_up_creates_notification(self, user, store, set_balances):
        set_balances(user, experience=90)
        check_in(user=user, scan_code=store.scan_code)

        notification = Notification.objects.get(user=user)
        assert notification.title == 'Level up!'
        assert notification.type == 'success'

    def test_no_notification_without_level_up(self, user, store):
        check_in(user=user, scan_code=store.scan_code)
        assert not Notification.objects.filter(user=user).exists()

    def test_store_config_change_does_not_rewrite_history(self, user, store):
        check_in(user=user, scan_code=store.scan_code)
        store.experience_per_visit = 500
        store.save()

        visit = Visit.objects.get(user=user)
        assert visit.experience_earned == 25


# =============================================================================
# Ledger Service Tests
# =============================================================================

@pytest.mark.django_db
class TestGrantBonus:
    """Tests for ledger.grant_bonus."""

    def test_grant_bonus(self, user):
        result = grant_bonus(
            user_id=user.id,
            amounts=RewardAmounts(experience=150, loyalty=1000, coins=30),
            description='Welcome bonus'
        )

        account = Account.objects.get(user=user)
        assert account.experience == 150
        assert account.level == 2
        assert account.rank == Rank.SILVER
        assert account.coins == 30
        assert result['leveled_up'] is True

        transaction = result['transaction']
        assert transaction.type == TransactionType.BONUS
        assert transaction.description == 'Welcome bonus'
        assert transaction.store is None

    def test_grant_bonus_default_description(self, user):
        result = grant_bonus(user_id=user.id, amounts=RewardAmounts(coins=1))
        assert result['transaction'].description == 'Bonus'

    def test_grant_bonus_missing_account(self, user):
        Account.objects.filter(user=user).delete()
        with pytest.raises(AccountNotFoundError):
            grant_bonus(user_id=user.id, amounts=RewardAmounts(coins=1))
        assert RewardTransaction.objects.count() == 0


# =============================================================================
# History Service Tests
# =============================================================================

@pytest.mark.django_db
class TestHistory:
    """Tests for history.py service functions."""

    def test_visits_are_newest_first_and_capped(self, user, store):
        for _ in range(55):
            check_in(user=user, scan_code=store.scan_code)

        visits = list(list_visits(user=user))
        assert len(visits) == 50
        timestamps = [v.created_at for v in visits]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_transactions_capped(self, user, store):
        for _ in range(52):
            check_in(user=user, scan_code=store.scan_code)

        assert len(list(list_reward_transactions(user=user))) == 50

    def test_history_is_per_user(self, user, other_user, store):
        check_in(user=user, scan_code=store.scan_code)
        assert list(list_visits(user=other_user)) == []
        assert list(list_reward_transactions(user=other_user)) == []

    def test_activity_feed(self, user, store):
        check_in(user=user, scan_code=store.scan_code)
        grant_bonus(user_id=user.id, amounts=RewardAmounts(coins=5))

        feed = get_activity_feed(user=user)
        assert len(feed) == 2
        by_type = {entry['type']: entry for entry in feed}
        assert by_type['checkin']['store_name'] == 'Corner Cafe'
        assert by_type['bonus']['store_name'] is None

    def test_activity_feed_capped(self, user, store):
        for _ in range(25):
            check_in(user=user, scan_code=store.scan_code)
        assert len(get_activity_feed(user=user)) == 20


# =============================================================================
# Concurrency Tests (Race Conditions)
# =============================================================================

class TestCheckInConcurrency(TransactionTestCase):
    """
    Concurrent check-ins on one account must not lose updates.

    Note: TransactionTestCase is required so each thread commits real
    transactions against the shared test database.
    """

    def setUp(self):
        self.user = User.objects.create_user(
            email='racer@test.com',
            password='TestPass123!',
            display_name='Racer',
        )
        self.store = create_store(
            name='Busy Store',
            experience_per_visit=10,
            loyalty_per_visit=10,
            coins_per_visit=1,
            gems_per_visit=0,
        )

    def test_concurrent_check_ins_no_lost_updates(self):
        n = 8
        errors = []

        def scan():
            try:
                check_in(user=self.user, scan_code=self.store.scan_code)
            except Exception as e:
                errors.append(f"Unexpected error: {e}")
            finally:
                connection.close()

        threads = [threading.Thread(target=scan) for _ in range(n)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []

        account = Account.objects.get(user=self.user)
        assert account.experience == 10 * n
        assert account.loyalty == 10 * n
        assert account.coins == n
        assert account.level == 10 * n // 100 + 1
        assert Visit.objects.filter(user=self.user).count() == n
