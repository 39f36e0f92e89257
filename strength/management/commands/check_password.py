"""
Management command to check a password against the stored thresholds.

Usage:
    python manage.py check_password 'Password12!!' --confirm 'Password12!!'
"""
from django.core.management.base import BaseCommand, CommandError

from enforcer.messages import format_result, server_rejection
from enforcer.rules import check_strength, evaluate
from strength.models import PasswordStrengthSettings


class Command(BaseCommand):
    help = 'Check a password against the configured password strength thresholds'

    def add_arguments(self, parser):
        parser.add_argument('password', help='Password to check')
        parser.add_argument(
            '--confirm',
            default=None,
            help='Confirmation value; when given it must match the password'
        )

    def handle(self, *args, **options):
        password = options['password']
        confirm = options['confirm']
        thresholds = PasswordStrengthSettings.get_thresholds()

        result = evaluate(password, thresholds, confirm)

        self.stdout.write(
            f"Thresholds: length >= {thresholds.min_length}, "
            f"digits >= {thresholds.min_numeric}, special >= {thresholds.min_special}"
        )
        checks = [
            ('Length', f"{result.length}", result.length_ok),
            ('Digits', f"{result.numeric_count}", result.numeric_ok),
            ('Special characters', f"{result.special_count}", result.special_ok),
        ]
        if confirm is not None:
            checks.append(('Confirmation matches', 'yes' if result.match_ok else 'no', result.match_ok))

        for label, value, ok in checks:
            line = f"   {'✓' if ok else '✗'} {label}: {value}"
            self.stdout.write(self.style.SUCCESS(line) if ok else self.style.ERROR(line))

        text, kind = format_result(password, result, thresholds, confirm is not None)
        self.stdout.write(text)

        if check_strength(password, thresholds) is not None:
            raise CommandError(server_rejection(thresholds))
        if not result.overall_valid:
            raise CommandError("Passwords do not match.")

        self.stdout.write(self.style.SUCCESS("Password accepted."))
