from rest_framework import serializers
from .models import CoinTransfer, AddressBookEntry
from apps.accounts.models import User


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    display_name = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'display_name']
        read_only_fields = fields

    def get_display_name(self, obj) -> str:
        return obj.get_display_name()


class CoinTransferSerializer(serializers.ModelSerializer):
    from_user = UserMinimalSerializer(read_only=True)
    to_user = UserMinimalSerializer(read_only=True)
    direction = serializers.SerializerMethodField()

    class Meta:
        model = CoinTransfer
        fields = [
            'id',
            'from_user',
            'to_user',
            'amount',
            'message',
            'status',
            'type',
            'direction',
            'created_at',
        ]
        read_only_fields = fields

    def get_direction(self, obj) -> str:
        """'sent' or 'received' from the requesting user's point of view."""
        request = self.context.get('request')
        if request and obj.from_user_id == request.user.id:
            return 'sent'
        return 'received'


class AddressBookEntrySerializer(serializers.ModelSerializer):
    recipient = UserMinimalSerializer(read_only=True)

    class Meta:
        model = AddressBookEntry
        fields = ['id', 'recipient', 'nickname', 'is_favorite', 'created_at', 'updated_at']
        read_only_fields = fields


# ==========================================
# Input serializers
# ==========================================

class TransferInputSerializer(serializers.Serializer):
    """
    Input serializer for a coin transfer.

    Range and length rules are enforced by the transfer service so the
    response carries a stable error code.
    """
    to_user_id = serializers.UUIDField()
    amount = serializers.IntegerField()
    message = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)


class AddressBookCreateSerializer(serializers.Serializer):
    recipient_id = serializers.UUIDField()
    nickname = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    is_favorite = serializers.BooleanField(required=False, default=False)


class AddressBookUpdateSerializer(serializers.Serializer):
    nickname = serializers.CharField(max_length=100, required=False)
    is_favorite = serializers.BooleanField(required=False)


class BalanceResponseSerializer(serializers.Serializer):
    coins = serializers.IntegerField()
