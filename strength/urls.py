from django.urls import path
from . import views

app_name = 'strength'

urlpatterns = [
    path('settings/', views.settings_view, name='settings'),
    path('account/change-password/', views.account_password_view, name='account_password'),
]
