from django.core.exceptions import ValidationError
from django.test import TestCase

from enforcer.rules import Thresholds
from strength.models import PasswordStrengthSettings


class PasswordStrengthSettingsTest(TestCase):

    def test_defaults(self):
        settings = PasswordStrengthSettings.get_settings()
        self.assertEqual(settings.pk, 1)
        self.assertEqual(settings.thresholds, Thresholds(10, 2, 2))

    def test_get_settings_returns_the_same_row(self):
        first = PasswordStrengthSettings.get_settings()
        second = PasswordStrengthSettings.get_settings()
        self.assertEqual(first.pk, second.pk)
        self.assertEqual(PasswordStrengthSettings.objects.count(), 1)

    def test_second_instance_is_rejected(self):
        """Only one settings row may ever exist"""
        PasswordStrengthSettings.get_settings()
        with self.assertRaises(ValidationError):
            PasswordStrengthSettings(min_length=8).save()

    def test_set_thresholds(self):
        PasswordStrengthSettings.set_thresholds(Thresholds(14, 3, 1))
        self.assertEqual(PasswordStrengthSettings.get_thresholds(), Thresholds(14, 3, 1))

    def test_admin_bounds(self):
        settings = PasswordStrengthSettings.get_settings()
        for field, value in (('min_length', 0), ('min_length', 51), ('min_numeric', 21), ('min_special', 21)):
            with self.subTest(field=field, value=value):
                setattr(settings, field, value)
                with self.assertRaises(ValidationError):
                    settings.full_clean()
                settings.refresh_from_db()

    def test_bounds_are_inclusive(self):
        settings = PasswordStrengthSettings.get_settings()
        settings.min_length, settings.min_numeric, settings.min_special = 50, 0, 20
        settings.full_clean()

    def test_str(self):
        self.assertEqual(
            str(PasswordStrengthSettings.get_settings()),
            "Password Strength (length: 10, digits: 2, special: 2)",
        )
