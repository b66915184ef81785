from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Store, Announcement
from .serializers import (
    StoreSerializer,
    StoreAdminSerializer,
    FavoriteStoreSerializer,
    AddFavoriteSerializer,
    AnnouncementSerializer,
    QRCodeResponseSerializer,
)

from apps.stores.services import (
    create_store,
    generate_qr_data_url,
    list_favorites,
    add_favorite,
    remove_favorite,
    list_active_announcements,
    list_announcements_for_user,
    # Exceptions
    StoreNotFoundError,
)


class StoreViewSet(viewsets.ModelViewSet):
    """
    ViewSet for participating stores.

    list / retrieve: any authenticated user
    create / update / partial_update / qr: staff only

    Stores are never deleted through the API; visits keep a protected
    reference to them.
    """

    queryset = Store.objects.all()
    http_method_names = ['get', 'post', 'put', 'patch', 'head', 'options']
    serializer_class = StoreSerializer
    permission_classes = [IsAuthenticated]

    def get_serializer_class(self):
        """Staff see scan codes."""
        if self.request.user.is_staff:
            return StoreAdminSerializer
        return StoreSerializer

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['create', 'update', 'partial_update', 'qr']:
            return [IsAuthenticated(), IsAdminUser()]
        return [IsAuthenticated()]

    def create(self, request, *args, **kwargs):
        """Create a store with a generated scan code."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        store = create_store(**serializer.validated_data)

        output_serializer = StoreAdminSerializer(store)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: QRCodeResponseSerializer})
    @action(detail=True, methods=['get'])
    def qr(self, request, pk=None):
        """Render the store's check-in QR code."""
        store = self.get_object()
        return Response({'qr_code': generate_qr_data_url(store=store)})


@extend_schema(
    methods=['GET'],
    responses={200: FavoriteStoreSerializer(many=True)},
    description="List the current user's favorite stores.",
    tags=['stores'],
)
@extend_schema(
    methods=['POST'],
    request=AddFavoriteSerializer,
    responses={201: FavoriteStoreSerializer},
    description="Add a store to favorites. Adding twice is a no-op.",
    tags=['stores'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def favorite_stores(request):
    """List or add favorite stores."""
    if request.method == 'GET':
        serializer = FavoriteStoreSerializer(list_favorites(user=request.user), many=True)
        return Response(serializer.data)

    input_serializer = AddFavoriteSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        favorite = add_favorite(
            user=request.user,
            store_id=input_serializer.validated_data['store_id']
        )
    except StoreNotFoundError as e:
        return Response({'error': str(e), 'code': e.code}, status=status.HTTP_404_NOT_FOUND)

    return Response(FavoriteStoreSerializer(favorite).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={204: None},
    description="Remove a store from favorites.",
    tags=['stores'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def remove_favorite_store(request, store_id):
    """Remove a favorite store."""
    try:
        remove_favorite(user=request.user, store_id=store_id)
    except StoreNotFoundError as e:
        return Response({'error': str(e), 'code': e.code}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)


class AnnouncementViewSet(viewsets.ModelViewSet):
    """
    ViewSet for announcements.

    list: Visible announcements
    filtered: Global announcements plus those of the user's favorite stores
    create / update / partial_update / destroy: staff only
    """

    serializer_class = AnnouncementSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        """Staff manage every announcement; everyone else sees visible ones."""
        if self.request.user.is_staff and self.action not in ['list', 'filtered']:
            return Announcement.objects.select_related('store')
        return list_active_announcements()

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action in ['create', 'update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsAdminUser()]
        return [IsAuthenticated()]

    def perform_create(self, serializer):
        serializer.save(created_by=self.request.user)

    @action(detail=False, methods=['get'])
    def filtered(self, request):
        """Announcements relevant to the current user."""
        announcements = list_announcements_for_user(user=request.user)
        serializer = self.get_serializer(announcements, many=True)
        return Response(serializer.data)
