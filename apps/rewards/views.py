from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.rewards.leveling import RewardAmounts
from .serializers import (
    AccountSerializer,
    VisitSerializer,
    RewardTransactionSerializer,
    ActivitySerializer,
    CheckInSerializer,
    BonusSerializer,
    CheckInResultSerializer,
    BonusResultSerializer,
)
from .services import (
    check_in,
    grant_bonus,
    get_account,
    list_visits,
    list_reward_transactions,
    get_activity_feed,
    # Exceptions
    InvalidCodeError,
    CheckInCooldownError,
    AccountNotFoundError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


def _error(exc, status_code):
    return Response({'error': str(exc), 'code': exc.code}, status=status_code)


@extend_schema(
    request=CheckInSerializer,
    responses={
        200: CheckInResultSerializer,
        400: ErrorResponseSerializer,
    },
    description="Redeem a store's QR code for its per-visit reward.",
    tags=['rewards'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def checkin(request):
    """Check in at a store."""
    serializer = CheckInSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        result = check_in(user=request.user, scan_code=serializer.validated_data['qr_code'])
    except (InvalidCodeError, CheckInCooldownError) as e:
        return _error(e, status.HTTP_400_BAD_REQUEST)
    except AccountNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)

    return Response({
        'visit': VisitSerializer(result['visit']).data,
        'transaction': RewardTransactionSerializer(result['transaction']).data,
        'store_name': result['store_name'],
        'rewards': result['rewards'],
        'leveled_up': result['leveled_up'],
        'level_before': result['level_before'],
        'level_after': result['level_after'],
        'account': AccountSerializer(result['account']).data,
    })


@extend_schema(
    responses={200: AccountSerializer, 404: ErrorResponseSerializer},
    description="Current balances, level and rank.",
    tags=['rewards'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def account(request):
    """Get the current user's reward account."""
    try:
        reward_account = get_account(user_id=request.user.id)
    except AccountNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)

    return Response(AccountSerializer(reward_account).data)


@extend_schema(
    responses={200: VisitSerializer(many=True)},
    description="The 50 most recent check-ins.",
    tags=['rewards'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def visits(request):
    """Get visit history."""
    serializer = VisitSerializer(list_visits(user=request.user), many=True)
    return Response(serializer.data)


@extend_schema(
    responses={200: RewardTransactionSerializer(many=True)},
    description="The 50 most recent reward transactions.",
    tags=['rewards'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def transactions(request):
    """Get reward transaction history."""
    serializer = RewardTransactionSerializer(list_reward_transactions(user=request.user), many=True)
    return Response(serializer.data)


@extend_schema(
    responses={200: ActivitySerializer(many=True)},
    description="The 20 most recent reward events with store names.",
    tags=['rewards'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def activity(request):
    """Get the activity feed."""
    serializer = ActivitySerializer(get_activity_feed(user=request.user), many=True)
    return Response(serializer.data)


@extend_schema(
    request=BonusSerializer,
    responses={
        201: BonusResultSerializer,
        404: ErrorResponseSerializer,
    },
    description="Grant a bonus reward to a user (staff only).",
    tags=['rewards'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminUser])
def bonus(request):
    """Grant a bonus."""
    serializer = BonusSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    amounts = RewardAmounts(
        experience=data['experience'],
        loyalty=data['loyalty'],
        coins=data['coins'],
        gems=data['gems'],
    )

    try:
        result = grant_bonus(
            user_id=data['user_id'],
            amounts=amounts,
            description=data['description']
        )
    except AccountNotFoundError as e:
        return _error(e, status.HTTP_404_NOT_FOUND)

    return Response({
        'transaction_id': result['transaction'].id,
        'leveled_up': result['leveled_up'],
        'level_before': result['level_before'],
        'level_after': result['level_after'],
        'account': AccountSerializer(result['account']).data,
    }, status=status.HTTP_201_CREATED)
