from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    NftItemSerializer,
    UserNftSerializer,
    AwardNftSerializer,
    UserNftCollectionSerializer,
)
from .services import (
    list_active_nfts,
    list_user_nfts,
    count_user_nfts,
    award_nft,
    # Exceptions
    NftNotFoundError,
    RecipientNotFoundError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


@extend_schema(
    responses={200: NftItemSerializer(many=True)},
    description="Active NFT catalog.",
    tags=['nfts'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def catalog(request):
    """List collectible NFTs."""
    serializer = NftItemSerializer(list_active_nfts(), many=True)
    return Response(serializer.data)


@extend_schema(
    responses={200: UserNftCollectionSerializer},
    description="The current user's NFT collection, most recent first.",
    tags=['nfts'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_nfts(request):
    """Get the current user's collection."""
    user_nfts = list_user_nfts(user=request.user)
    return Response({
        'count': count_user_nfts(user=request.user),
        'results': UserNftSerializer(user_nfts, many=True).data,
    })


@extend_schema(
    request=AwardNftSerializer,
    responses={
        201: UserNftSerializer,
        404: ErrorResponseSerializer,
    },
    description="Award an NFT to a user (staff only).",
    tags=['nfts'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminUser])
def award(request):
    """Award an NFT."""
    serializer = AwardNftSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        user_nft = award_nft(
            user_id=data['user_id'],
            nft_id=data['nft_id'],
            reason=data['reason'],
            metadata=data['metadata']
        )
    except (NftNotFoundError, RecipientNotFoundError) as e:
        return Response({'error': str(e), 'code': e.code}, status=status.HTTP_404_NOT_FOUND)

    return Response(UserNftSerializer(user_nft).data, status=status.HTTP_201_CREATED)
