from rest_framework import serializers
from .models import NftItem, UserNft


class NftItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = NftItem
        fields = ['id', 'name', 'description', 'image_url', 'category', 'rarity', 'created_at']
        read_only_fields = fields


class UserNftSerializer(serializers.ModelSerializer):
    """Owned NFT with catalog details."""

    nft = NftItemSerializer(read_only=True)

    class Meta:
        model = UserNft
        fields = ['id', 'nft', 'obtained_at', 'obtained_reason', 'metadata']
        read_only_fields = fields


class AwardNftSerializer(serializers.Serializer):
    """Input serializer for awarding an NFT."""
    user_id = serializers.UUIDField()
    nft_id = serializers.UUIDField()
    reason = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    metadata = serializers.DictField(required=False, default=dict)


class UserNftCollectionSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    results = UserNftSerializer(many=True)
