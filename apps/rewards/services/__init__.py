"""
Rewards app services layer.

Services contain business logic and orchestrate operations across models.
All balance-changing operations run in a transaction with the affected
account rows locked.
"""

from .exceptions import (
    RewardsServiceError,
    InvalidCodeError,
    AccountNotFoundError,
    CheckInCooldownError,
    InvalidRewardError,
)

from .ledger import (
    get_account,
    lock_account,
    lock_accounts,
    credit_account,
    grant_bonus,
)

from .checkin import (
    check_in,
)

from .history import (
    list_visits,
    list_reward_transactions,
    get_activity_feed,
)


__all__ = [
    # Exceptions
    'RewardsServiceError',
    'InvalidCodeError',
    'AccountNotFoundError',
    'CheckInCooldownError',
    'InvalidRewardError',

    # Ledger
    'get_account',
    'lock_account',
    'lock_accounts',
    'credit_account',
    'grant_bonus',

    # Check-in
    'check_in',

    # History
    'list_visits',
    'list_reward_transactions',
    'get_activity_feed',
]
