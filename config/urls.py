"""
URL configuration for config project.

The password reset confirmation route is declared before the
django.contrib.auth include so the strength-enforcing view wins.
"""

from django.contrib import admin
from django.contrib.auth.decorators import login_required
from django.urls import path, include
from django.views.generic import RedirectView
from strength.views import StrengthPasswordResetConfirmView

urlpatterns = [
    path(
        "",
        login_required(RedirectView.as_view(pattern_name="strength:account_password")),
        name="index",
    ),
    path("admin/", admin.site.urls),
    path(
        "accounts/reset/<uidb64>/<token>/",
        StrengthPasswordResetConfirmView.as_view(),
        name="password_reset_confirm",
    ),
    path("accounts/", include("django.contrib.auth.urls")),
    path("auth/", include("authentication.urls")),
    path("password-strength/", include("strength.urls")),
]
