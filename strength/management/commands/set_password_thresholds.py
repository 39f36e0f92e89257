"""
Management command to update the password strength thresholds.

Usage:
    python manage.py set_password_thresholds --min-length 12 --min-numeric 2 --min-special 1
"""
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from strength.models import PasswordStrengthSettings


class Command(BaseCommand):
    help = 'Update the password strength thresholds (admin bounds apply)'

    def add_arguments(self, parser):
        parser.add_argument('--min-length', type=int, help='Minimum length (1-50)')
        parser.add_argument('--min-numeric', type=int, help='Minimum digits (0-20)')
        parser.add_argument('--min-special', type=int, help='Minimum special characters (0-20)')

    def handle(self, *args, **options):
        settings = PasswordStrengthSettings.get_settings()
        changed = []

        for field in ('min_length', 'min_numeric', 'min_special'):
            value = options[field]
            if value is not None:
                setattr(settings, field, value)
                changed.append(field)

        if not changed:
            self.stdout.write(f"No changes. Current settings: {settings}")
            return

        try:
            settings.full_clean()
        except ValidationError as e:
            raise CommandError(
                "; ".join(f"{field}: {' '.join(errors)}" for field, errors in e.message_dict.items())
            )

        settings.save()
        self.stdout.write(self.style.SUCCESS(f"Updated {', '.join(changed)}. {settings}"))
