from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from enforcer.rules import (
    DEFAULT_MIN_LENGTH, DEFAULT_MIN_NUMERIC, DEFAULT_MIN_SPECIAL, Thresholds,
)


# Admin-facing bounds; the enforcement core itself accepts any non-negative value
MIN_LENGTH_BOUNDS = (1, 50)
MIN_COUNT_BOUNDS = (0, 20)


class PasswordStrengthSettings(models.Model):
    """
    Singleton model holding the password strength thresholds.
    Only one instance should exist.
    """
    min_length = models.PositiveIntegerField(
        default=DEFAULT_MIN_LENGTH,
        validators=[MinValueValidator(MIN_LENGTH_BOUNDS[0]), MaxValueValidator(MIN_LENGTH_BOUNDS[1])],
        verbose_name="Minimum Length",
        help_text="Minimum number of characters required in the password."
    )
    min_numeric = models.PositiveIntegerField(
        default=DEFAULT_MIN_NUMERIC,
        validators=[MinValueValidator(MIN_COUNT_BOUNDS[0]), MaxValueValidator(MIN_COUNT_BOUNDS[1])],
        verbose_name="Minimum Digits",
        help_text="Minimum number of digits (0-9) required in the password."
    )
    min_special = models.PositiveIntegerField(
        default=DEFAULT_MIN_SPECIAL,
        validators=[MinValueValidator(MIN_COUNT_BOUNDS[0]), MaxValueValidator(MIN_COUNT_BOUNDS[1])],
        verbose_name="Minimum Special Characters",
        help_text='Minimum number of special characters (!@#$%^&*(),.?":{}|<>) required in the password.'
    )
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Updated At")

    class Meta:
        verbose_name = "Password Strength Settings"
        verbose_name_plural = "Password Strength Settings"

    def save(self, *args, **kwargs):
        """Ensure only one instance exists (Singleton pattern)."""
        if not self.pk and PasswordStrengthSettings.objects.exists():
            raise ValidationError("Only one PasswordStrengthSettings instance is allowed.")
        return super().save(*args, **kwargs)

    @classmethod
    def get_settings(cls):
        """Get or create the singleton settings instance."""
        settings, created = cls.objects.get_or_create(pk=1)
        return settings

    @classmethod
    def get_thresholds(cls):
        return cls.get_settings().thresholds

    @classmethod
    def set_thresholds(cls, thresholds):
        """Store new thresholds on the singleton and return it."""
        settings = cls.get_settings()
        settings.min_length = thresholds.min_length
        settings.min_numeric = thresholds.min_numeric
        settings.min_special = thresholds.min_special
        settings.save(update_fields=['min_length', 'min_numeric', 'min_special', 'updated_at'])
        return settings

    @property
    def thresholds(self):
        return Thresholds(
            min_length=int(self.min_length),
            min_numeric=int(self.min_numeric),
            min_special=int(self.min_special),
        )

    def __str__(self):
        return (
            f"Password Strength (length: {self.min_length}, "
            f"digits: {self.min_numeric}, special: {self.min_special})"
        )
