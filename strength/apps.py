from django.apps import AppConfig


class StrengthConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'strength'
    verbose_name = 'Password Strength'
