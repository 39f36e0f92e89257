from django.contrib import admin

from enforcer.rules import SPECIAL_CHARACTERS
from .models import PasswordStrengthSettings


@admin.register(PasswordStrengthSettings)
class PasswordStrengthSettingsAdmin(admin.ModelAdmin):
    """
    Admin interface for the password strength thresholds (Singleton).
    """
    list_display = ('__str__', 'min_length', 'min_numeric', 'min_special', 'updated_at')
    readonly_fields = ('updated_at',)
    fieldsets = (
        ('Password Requirements', {
            'fields': ('min_length', 'min_numeric', 'min_special'),
            'description': 'These settings apply to password reset forms and account password changes. '
                           f'Special characters are: {SPECIAL_CHARACTERS}'
        }),
        ('Timestamps', {
            'fields': ('updated_at',),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        """Only allow adding if no settings exist."""
        return not PasswordStrengthSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        """Prevent deletion of the singleton settings."""
        return False
