from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    NotificationSerializer,
    UnreadCountSerializer,
    MarkAllReadSerializer,
)
from .services import (
    list_notifications,
    count_unread,
    mark_read,
    mark_all_read,
    NotificationNotFoundError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    code = serializers.CharField()


@extend_schema(
    responses={200: NotificationSerializer(many=True)},
    description="The 20 most recent notifications.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def notification_list(request):
    """List notifications."""
    serializer = NotificationSerializer(list_notifications(user=request.user), many=True)
    return Response(serializer.data)


@extend_schema(
    responses={200: UnreadCountSerializer},
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def unread_count(request):
    """Number of unread notifications."""
    return Response({'count': count_unread(user=request.user)})


@extend_schema(
    request=None,
    responses={200: NotificationSerializer, 404: ErrorResponseSerializer},
    tags=['notifications'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def read(request, notification_id):
    """Mark one notification as read."""
    try:
        notification = mark_read(user=request.user, notification_id=notification_id)
    except NotificationNotFoundError as e:
        return Response({'error': str(e), 'code': e.code}, status=status.HTTP_404_NOT_FOUND)

    return Response(NotificationSerializer(notification).data)


@extend_schema(
    request=None,
    responses={200: MarkAllReadSerializer},
    tags=['notifications'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def read_all(request):
    """Mark every notification as read."""
    return Response({'updated': mark_all_read(user=request.user)})
