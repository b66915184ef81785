from django.urls import path
from . import views

app_name = 'rewards'

urlpatterns = [
    path('checkin/', views.checkin, name='checkin'),
    path('rewards/account/', views.account, name='account'),
    path('rewards/visits/', views.visits, name='visits'),
    path('rewards/transactions/', views.transactions, name='transactions'),
    path('rewards/activity/', views.activity, name='activity'),
    path('rewards/bonus/', views.bonus, name='bonus'),
]
