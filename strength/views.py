import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth import update_session_auth_hash
from django.contrib.auth.decorators import login_required
from django.contrib.auth.views import PasswordResetConfirmView
from django.shortcuts import redirect, render
from django.urls import reverse_lazy

from enforcer.rules import SPECIAL_CHARACTERS
from .forms import AccountPasswordForm, PasswordStrengthSettingsForm, StrengthSetPasswordForm
from .models import PasswordStrengthSettings

logger = logging.getLogger(__name__)


@staff_member_required
def settings_view(request):
    """Admin settings screen for the password strength thresholds."""
    instance = PasswordStrengthSettings.get_settings()

    if request.method == 'POST':
        form = PasswordStrengthSettingsForm(request.POST, instance=instance)
        if form.is_valid():
            settings = form.save()
            logger.info("Password strength thresholds changed by %s: %s", request.user.username, settings)
            messages.success(request, 'Password strength settings saved.')
            return redirect('strength:settings')
    else:
        form = PasswordStrengthSettingsForm(instance=instance)

    return render(request, 'strength/settings.html', {
        'form': form,
        'special_characters': SPECIAL_CHARACTERS,
    })


class StrengthPasswordResetConfirmView(PasswordResetConfirmView):
    """Password reset confirmation enforcing the strength thresholds."""
    form_class = StrengthSetPasswordForm
    template_name = 'strength/password_reset_confirm.html'
    success_url = reverse_lazy('password_reset_complete')


@login_required
def account_password_view(request):
    """Handle the password section of the account details page."""
    if request.method == 'POST':
        form = AccountPasswordForm(request.user, request.POST)
        if form.is_valid():
            if form.changes_password:
                user = form.save()
                update_session_auth_hash(request, user)
                messages.success(request, 'Your password has been changed.')
            else:
                messages.info(request, 'Your password was left unchanged.')
            return redirect('strength:account_password')
    else:
        form = AccountPasswordForm(request.user)

    return render(request, 'strength/account_password.html', {'form': form})
