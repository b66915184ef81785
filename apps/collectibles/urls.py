from django.urls import path
from . import views

app_name = 'collectibles'

urlpatterns = [
    path('', views.catalog, name='catalog'),
    path('my/', views.my_nfts, name='my-nfts'),
    path('award/', views.award, name='award'),
]
