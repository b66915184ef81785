from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'coins'

# Router for ViewSets
router = DefaultRouter()
router.register(r'address-book', views.AddressBookViewSet, basename='address-book')

urlpatterns = [
    path('coins/transfer/', views.transfer, name='transfer'),
    path('coins/balance/', views.balance, name='balance'),
    path('coins/transactions/', views.transactions, name='transactions'),

    # Address book ViewSet routes
    # GET    /api/address-book/        - List entries
    # POST   /api/address-book/        - Add entry
    # GET    /api/address-book/{id}/   - Entry details
    # PUT    /api/address-book/{id}/   - Update entry
    # PATCH  /api/address-book/{id}/   - Update entry
    # DELETE /api/address-book/{id}/   - Remove entry
    path('', include(router.urls)),
]
