from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('', views.notification_list, name='list'),
    path('unread-count/', views.unread_count, name='unread-count'),
    path('mark-all-read/', views.read_all, name='mark-all-read'),
    path('<uuid:notification_id>/read/', views.read, name='read'),
]
