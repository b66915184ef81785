from rest_framework import serializers

from apps.rewards.leveling import XP_PER_LEVEL
from .models import Account, Visit, RewardTransaction


class AccountSerializer(serializers.ModelSerializer):
    """Balances plus derived level progress."""

    experience_to_next_level = serializers.SerializerMethodField()

    class Meta:
        model = Account
        fields = [
            'experience',
            'loyalty',
            'coins',
            'gems',
            'level',
            'rank',
            'experience_to_next_level',
            'updated_at',
        ]
        read_only_fields = fields

    def get_experience_to_next_level(self, obj) -> int:
        return obj.level * XP_PER_LEVEL - obj.experience


class VisitSerializer(serializers.ModelSerializer):
    store_name = serializers.CharField(source='store.name', read_only=True)
    leveled_up = serializers.BooleanField(read_only=True)

    class Meta:
        model = Visit
        fields = [
            'id',
            'store',
            'store_name',
            'experience_earned',
            'loyalty_earned',
            'coins_earned',
            'gems_earned',
            'level_before',
            'level_after',
            'leveled_up',
            'created_at',
        ]
        read_only_fields = fields


class RewardTransactionSerializer(serializers.ModelSerializer):
    store_name = serializers.CharField(source='store.name', read_only=True, default=None)

    class Meta:
        model = RewardTransaction
        fields = [
            'id',
            'type',
            'store',
            'store_name',
            'experience',
            'loyalty',
            'coins',
            'gems',
            'description',
            'created_at',
        ]
        read_only_fields = fields


class ActivitySerializer(serializers.Serializer):
    """Flattened activity feed entry."""
    id = serializers.UUIDField()
    type = serializers.CharField()
    store_name = serializers.CharField(allow_null=True)
    description = serializers.CharField()
    experience = serializers.IntegerField()
    loyalty = serializers.IntegerField()
    coins = serializers.IntegerField()
    gems = serializers.IntegerField()
    created_at = serializers.DateTimeField()


# ==========================================
# Input serializers
# ==========================================

class CheckInSerializer(serializers.Serializer):
    """Input serializer for a check-in."""
    qr_code = serializers.CharField(
        max_length=255,
        trim_whitespace=True,
        help_text="Payload read from the store's QR code"
    )


# Largest value the per-event amount columns hold
MAX_REWARD_AMOUNT = 2147483647


class BonusSerializer(serializers.Serializer):
    """Input serializer for a staff bonus grant."""
    user_id = serializers.UUIDField()
    experience = serializers.IntegerField(min_value=0, max_value=MAX_REWARD_AMOUNT, default=0)
    loyalty = serializers.IntegerField(min_value=0, max_value=MAX_REWARD_AMOUNT, default=0)
    coins = serializers.IntegerField(min_value=0, max_value=MAX_REWARD_AMOUNT, default=0)
    gems = serializers.IntegerField(min_value=0, max_value=MAX_REWARD_AMOUNT, default=0)
    description = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


# ==========================================
# Response serializers (API documentation)
# ==========================================

class RewardAmountsSerializer(serializers.Serializer):
    experience = serializers.IntegerField()
    loyalty = serializers.IntegerField()
    coins = serializers.IntegerField()
    gems = serializers.IntegerField()


class CheckInResultSerializer(serializers.Serializer):
    visit = VisitSerializer()
    transaction = RewardTransactionSerializer()
    store_name = serializers.CharField()
    rewards = RewardAmountsSerializer()
    leveled_up = serializers.BooleanField()
    level_before = serializers.IntegerField()
    level_after = serializers.IntegerField()
    account = AccountSerializer()


class BonusResultSerializer(serializers.Serializer):
    transaction_id = serializers.UUIDField()
    leveled_up = serializers.BooleanField()
    level_before = serializers.IntegerField()
    level_after = serializers.IntegerField()
    account = AccountSerializer()
