from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.test import TestCase

from enforcer.rules import PASSWORD_INSUFFICIENT_SPECIAL, PASSWORD_TOO_SHORT, Thresholds
from strength.models import PasswordStrengthSettings
from strength.validators import StrengthPasswordValidator


class StrengthPasswordValidatorTest(TestCase):

    def setUp(self):
        self.validator = StrengthPasswordValidator()

    def test_accepts_strong_password(self):
        self.assertIsNone(self.validator.validate('Zebra7!Kite9?'))

    def test_rejection_message_and_code(self):
        with self.assertRaises(ValidationError) as cm:
            self.validator.validate('Short1!')
        error = cm.exception.error_list[0]
        self.assertEqual(error.code, PASSWORD_TOO_SHORT)
        self.assertEqual(
            error.message,
            "Your password must contain at least 10 characters, 2 digits and 2 special characters.",
        )

    def test_rejection_is_logged(self):
        with self.assertLogs('strength.validators', 'INFO') as logs:
            with self.assertRaises(ValidationError):
                self.validator.validate('Zebra7Kite99')
        self.assertIn(PASSWORD_INSUFFICIENT_SPECIAL, logs.output[0])

    def test_reads_stored_thresholds_on_every_call(self):
        self.validator.validate('Zebra7!Kite9?')
        PasswordStrengthSettings.set_thresholds(Thresholds(16, 2, 2))
        with self.assertRaises(ValidationError):
            self.validator.validate('Zebra7!Kite9?')

    def test_fixed_thresholds(self):
        validator = StrengthPasswordValidator(Thresholds(4, 0, 0))
        validator.validate('abcd')
        self.assertEqual(validator('abcd'), 'abcd')

    def test_same_character_classes_as_live_checks(self):
        """Characters outside the special set never count"""
        with self.assertRaises(ValidationError):
            self.validator.validate('Zebra7-Kite9_')

    def test_help_text(self):
        text = self.validator.get_help_text()
        self.assertIn("at least 10 characters long", text)
        self.assertIn('!@#$%^&*(),.?":{}|<>', text)

    def test_registered_as_auth_password_validator(self):
        with self.assertRaises(ValidationError) as cm:
            validate_password('Zebra7Kite9x')
        codes = [error.code for error in cm.exception.error_list]
        self.assertIn(PASSWORD_INSUFFICIENT_SPECIAL, codes)
        validate_password('Zebra7!Kite9?')
