from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'stores'

# Router for ViewSets
router = DefaultRouter()
router.register(r'stores', views.StoreViewSet, basename='store')
router.register(r'announcements', views.AnnouncementViewSet, basename='announcement')

urlpatterns = [
    # Store ViewSet routes
    # GET    /api/stores/              - List stores
    # POST   /api/stores/              - Create store (staff)
    # GET    /api/stores/{id}/         - Store details
    # PUT    /api/stores/{id}/         - Update store (staff)
    # PATCH  /api/stores/{id}/         - Partial update (staff)
    # GET    /api/stores/{id}/qr/      - Check-in QR code (staff)

    # Announcement ViewSet routes
    # GET    /api/announcements/            - Visible announcements
    # GET    /api/announcements/filtered/   - Global + favorite stores
    # POST/PUT/PATCH/DELETE                 - Staff only

    # Favorites
    path('favorite-stores/', views.favorite_stores, name='favorite-stores'),
    path(
        'favorite-stores/<uuid:store_id>/',
        views.remove_favorite_store,
        name='favorite-store-remove'
    ),

    # Include router URLs
    path('', include(router.urls)),
]
