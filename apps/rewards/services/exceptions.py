"""
Domain-specific exceptions for rewards app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses. ``code`` is a
stable identifier the API boundary uses to pick a localized message.
"""

from apps.rewards.leveling import InvalidRewardError


class RewardsServiceError(Exception):
    """Base exception for all rewards service errors."""
    code = 'rewards_error'


class InvalidCodeError(RewardsServiceError):
    """Raised when a scanned code matches no store."""
    code = 'invalid_code'


class AccountNotFoundError(RewardsServiceError):
    """Raised when a user has no reward account."""
    code = 'account_not_found'


class CheckInCooldownError(RewardsServiceError):
    """Raised when the same store is scanned again inside the cooldown window."""
    code = 'checkin_cooldown'


__all__ = [
    'RewardsServiceError',
    'InvalidCodeError',
    'AccountNotFoundError',
    'CheckInCooldownError',
    'InvalidRewardError',
]
