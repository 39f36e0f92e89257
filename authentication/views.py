import logging

from django.contrib import messages
from django.contrib.auth import logout
from django.contrib.auth.views import LoginView
from django.shortcuts import redirect

from enforcer.rules import check_strength
from strength.models import PasswordStrengthSettings
from .forms import LoginForm

logger = logging.getLogger(__name__)


REMEMBER_ME_AGE = 1209600  # 2 weeks


class StrengthLoginView(LoginView):
    """
    Sign-in page.

    Existing passwords are never re-validated at login, but users whose
    password falls short of the current thresholds are asked to change it.
    """
    form_class = LoginForm
    template_name = 'authentication/login.html'
    redirect_authenticated_user = True

    def form_valid(self, form):
        response = super().form_valid(form)

        if form.cleaned_data.get('remember_me'):
            self.request.session.set_expiry(REMEMBER_ME_AGE)
        else:
            # Browser session (expires when browser closes)
            self.request.session.set_expiry(0)

        user = form.get_user()
        messages.success(self.request, f'Welcome back, {user.username}!')

        password = form.cleaned_data.get('password') or ''
        if check_strength(password, PasswordStrengthSettings.get_thresholds()) is not None:
            logger.info("User %s signed in with a password below the current thresholds", user.username)
            messages.warning(
                self.request,
                'Your password does not meet the current password requirements. Please change it.'
            )
        return response

    def form_invalid(self, form):
        messages.error(self.request, 'Invalid username or password.')
        return super().form_invalid(form)


def logout_view(request):
    """Handle user logout."""
    logout(request)
    messages.success(request, 'You have been logged out successfully.')
    return redirect('authentication:login')
