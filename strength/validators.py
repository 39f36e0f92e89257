"""
Server-side password validators.

These mirror the live form checks exactly: the thresholds come from the
PasswordStrengthSettings singleton and the character classes from
``enforcer.rules``.
"""
import logging

from django.core.exceptions import ValidationError

from enforcer.messages import requirements_summary, server_rejection
from enforcer.rules import SPECIAL_CHARACTERS, check_strength

logger = logging.getLogger(__name__)


class StrengthPasswordValidator:
    """
    Validates passwords against the configured strength thresholds.

    Usable both as a field validator (``validators=[StrengthPasswordValidator()]``)
    and as an ``AUTH_PASSWORD_VALIDATORS`` entry.

    Rules:
    - Minimum length: min_length characters
    - Minimum digits: min_numeric characters from 0-9
    - Minimum special characters: min_special characters from SPECIAL_CHARACTERS
    """

    def __init__(self, thresholds=None):
        # None means "read the stored settings on every call"
        self._thresholds = thresholds

    def get_thresholds(self):
        if self._thresholds is not None:
            return self._thresholds
        from .models import PasswordStrengthSettings
        return PasswordStrengthSettings.get_thresholds()

    def validate(self, password, user=None):
        thresholds = self.get_thresholds()
        code = check_strength(password or '', thresholds)
        if code is not None:
            logger.info("Rejected password: %s", code)
            raise ValidationError(
                server_rejection(thresholds),
                code=code,
            )

    def __call__(self, value):
        """Validate the password."""
        self.validate(value)
        return value

    def get_help_text(self):
        """Return help text for password field."""
        return (
            f"{requirements_summary(self.get_thresholds())} "
            f"Special characters are: {SPECIAL_CHARACTERS}"
        )
