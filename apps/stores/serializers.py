from rest_framework import serializers
from .models import Store, FavoriteStore, Announcement


class StoreSerializer(serializers.ModelSerializer):
    """Public store info; the scan code is never exposed to customers."""

    class Meta:
        model = Store
        fields = [
            'id',
            'name',
            'address',
            'experience_per_visit',
            'loyalty_per_visit',
            'coins_per_visit',
            'gems_per_visit',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class StoreAdminSerializer(StoreSerializer):
    """Staff view of a store, including its scan code."""

    class Meta(StoreSerializer.Meta):
        fields = StoreSerializer.Meta.fields + ['scan_code']
        read_only_fields = StoreSerializer.Meta.read_only_fields + ['scan_code']


class StoreMinimalSerializer(serializers.ModelSerializer):
    """Minimal store info for nested serialization."""

    class Meta:
        model = Store
        fields = ['id', 'name']
        read_only_fields = fields


class FavoriteStoreSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(source='store.id', read_only=True)
    store_name = serializers.CharField(source='store.name', read_only=True)

    class Meta:
        model = FavoriteStore
        fields = ['id', 'store_id', 'store_name', 'created_at']
        read_only_fields = fields


class AddFavoriteSerializer(serializers.Serializer):
    """Input serializer for following a store."""
    store_id = serializers.UUIDField()


class AnnouncementSerializer(serializers.ModelSerializer):
    store = StoreMinimalSerializer(read_only=True)
    store_id = serializers.PrimaryKeyRelatedField(
        queryset=Store.objects.all(),
        source='store',
        write_only=True,
        required=False,
        allow_null=True,
    )

    class Meta:
        model = Announcement
        fields = [
            'id',
            'store',
            'store_id',
            'title',
            'content',
            'priority',
            'is_active',
            'end_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']


class QRCodeResponseSerializer(serializers.Serializer):
    qr_code = serializers.CharField(help_text="PNG image as a data URL")
