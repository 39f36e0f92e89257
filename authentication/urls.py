from django.urls import path
from . import views

app_name = 'authentication'

urlpatterns = [
    path('login/', views.StrengthLoginView.as_view(), name='login'),
    path('logout/', views.logout_view, name='logout'),
]
