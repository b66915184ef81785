"""
Reward computation and leveling rules.

Pure functions over plain values: no ORM access, no I/O. Every write path
that changes experience or loyalty goes through ``level_for_experience`` and
``rank_for_loyalty`` so the stored ``level``/``rank`` columns can never drift
from the totals they are derived from.

Rules:
    - Level: 100 experience per level, uniform. ``level = experience // 100 + 1``
    - Rank: from cumulative loyalty, lower bound inclusive::

          loyalty < 1000          bronze
          1000 <= loyalty < 5000  silver
          5000 <= loyalty < 10000 gold
          loyalty >= 10000        platinum

Example::

    >>> state = AccountState(experience=90, loyalty=950, coins=5, gems=0,
    ...                      level=1, rank=Rank.BRONZE)
    >>> outcome = apply_reward(state, RewardAmounts(25, 60, 10, 1))
    >>> outcome.account.level, outcome.leveled_up
    (2, True)
    >>> outcome.account.rank == Rank.SILVER
    True
"""

from dataclasses import dataclass, fields

from django.db import models

XP_PER_LEVEL = 100


class Rank(models.TextChoices):
    BRONZE = 'bronze', 'Bronze'
    SILVER = 'silver', 'Silver'
    GOLD = 'gold', 'Gold'
    PLATINUM = 'platinum', 'Platinum'


# Highest threshold first
RANK_THRESHOLDS = (
    (10000, Rank.PLATINUM),
    (5000, Rank.GOLD),
    (1000, Rank.SILVER),
)


class InvalidRewardError(ValueError):
    """Raised when a reward amount is not a non-negative integer."""
    code = 'invalid_reward'


def _check_non_negative_int(name, value):
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRewardError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidRewardError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class RewardAmounts:
    """Per-visit (or per-grant) amounts of each currency."""

    experience: int = 0
    loyalty: int = 0
    coins: int = 0
    gems: int = 0

    def __post_init__(self):
        for field in fields(self):
            _check_non_negative_int(field.name, getattr(self, field.name))

    def __add__(self, other):
        if not isinstance(other, RewardAmounts):
            return NotImplemented
        return RewardAmounts(
            experience=self.experience + other.experience,
            loyalty=self.loyalty + other.loyalty,
            coins=self.coins + other.coins,
            gems=self.gems + other.gems,
        )

    @classmethod
    def from_store(cls, store):
        """Build the reward granted by one visit to ``store``."""
        return cls(
            experience=store.experience_per_visit,
            loyalty=store.loyalty_per_visit,
            coins=store.coins_per_visit,
            gems=store.gems_per_visit,
        )

    def as_dict(self):
        return {
            'experience': self.experience,
            'loyalty': self.loyalty,
            'coins': self.coins,
            'gems': self.gems,
        }


@dataclass(frozen=True)
class AccountState:
    """Transient copy of an account's balances."""

    experience: int = 0
    loyalty: int = 0
    coins: int = 0
    gems: int = 0
    level: int = 1
    rank: str = Rank.BRONZE


@dataclass(frozen=True)
class RewardOutcome:
    account: AccountState
    leveled_up: bool
    level_before: int
    level_after: int


def level_for_experience(experience: int) -> int:
    """Level reached with ``experience`` cumulative points."""
    return experience // XP_PER_LEVEL + 1


def rank_for_loyalty(loyalty: int) -> Rank:
    """Rank tier for ``loyalty`` cumulative points."""
    for threshold, rank in RANK_THRESHOLDS:
        if loyalty >= threshold:
            return rank
    return Rank.BRONZE


def apply_reward(current: AccountState, reward: RewardAmounts) -> RewardOutcome:
    """
    Add ``reward`` to ``current`` and derive the new level and rank.

    Never fails and never touches the database. ``leveled_up`` compares
    the recomputed level with the level stored on ``current``.
    """
    experience = current.experience + reward.experience
    loyalty = current.loyalty + reward.loyalty
    level = level_for_experience(experience)

    updated = AccountState(
        experience=experience,
        loyalty=loyalty,
        coins=current.coins + reward.coins,
        gems=current.gems + reward.gems,
        level=level,
        rank=rank_for_loyalty(loyalty),
    )
    return RewardOutcome(
        account=updated,
        leveled_up=level > current.level,
        level_before=current.level,
        level_after=level,
    )
